"""Local rule-based financial assistant.

Provides intelligent-sounding responses without any external API:

    message ─► classify_intent ─► COMPOSERS[intent] ─► AIResponse

Main entry point:
    local_assistant.generate_response(message, context) -> AIResponse
"""

import logging
import random
from typing import Optional, Tuple

from ...config import ASSISTANT_RANDOM_SEED
from ...schemas.assistant import AIResponse, FinancialContext, Intent
from .classifier import INTENT_RULES, classify_intent
from .composer import COMPOSERS, CONFIDENCE
from .knowledge import KNOWLEDGE_BASE, BenchmarkBand, Benchmarks, KnowledgeBase, classify_benchmark

logger = logging.getLogger(__name__)


class LocalFinancialAssistant:
    """Classifies a message and composes a templated reply from the context.

    The random source only picks between template variants. Pass a seeded
    `random.Random` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None, knowledge_base: KnowledgeBase = KNOWLEDGE_BASE):
        self.rng = rng or random.Random()
        self.knowledge_base = knowledge_base

    def classify(self, message: str) -> Intent:
        return classify_intent(message)

    def respond(self, message: str, context: FinancialContext) -> Tuple[Intent, AIResponse]:
        """Classify once and return the intent together with the reply built for it."""
        intent = self.classify(message)
        logger.debug(f"[LocalAssistant] Message: {message[:50]}")

        response = COMPOSERS[intent](context, self.rng, self.knowledge_base)

        logger.info(f"[LocalAssistant] Intent {intent.value} answered with confidence {response.confidence}")
        return intent, response

    def generate_response(self, message: str, context: FinancialContext) -> AIResponse:
        _, response = self.respond(message, context)
        return response


local_assistant = LocalFinancialAssistant(
    rng=random.Random(ASSISTANT_RANDOM_SEED) if ASSISTANT_RANDOM_SEED is not None else None
)

__all__ = [
    "LocalFinancialAssistant",
    "local_assistant",
    "classify_intent",
    "INTENT_RULES",
    "COMPOSERS",
    "CONFIDENCE",
    "KNOWLEDGE_BASE",
    "KnowledgeBase",
    "Benchmarks",
    "BenchmarkBand",
    "classify_benchmark",
]
