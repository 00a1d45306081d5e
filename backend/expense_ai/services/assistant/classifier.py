"""Intent detection for the local assistant.

All processing is local - no LLM call. Rules are checked in order and the
first match wins, so a message mentioning both "budget" and "save" is a
budget question.
"""

import re
from typing import Callable, List, Tuple

from ...schemas.assistant import Intent


def _starts_with(pattern: str) -> Callable[[str], bool]:
    regex = re.compile(pattern)
    return lambda text: regex.match(text) is not None


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    return lambda text: any(keyword in text for keyword in keywords)


INTENT_RULES: List[Tuple[Callable[[str], bool], Intent]] = [
    (_starts_with(r"(hi|hello|hey|good|morning|afternoon|evening|sup|yo)"), Intent.GREETING),
    (_contains_any("spend", "expense", "cost", "money"), Intent.SPENDING),
    (_contains_any("budget", "plan", "allocate"), Intent.BUDGET),
    (_contains_any("save", "saving", "cut", "reduce"), Intent.SAVING),
    (_contains_any("category", "categories", "breakdown"), Intent.CATEGORY),
    (_contains_any("predict", "forecast", "next", "future"), Intent.PREDICTION),
    (_contains_any("compare", "vs", "versus", "average"), Intent.COMPARISON),
]


def classify_intent(message: str) -> Intent:
    """Map a free-text message to an intent, falling back when nothing matches."""
    text = message.lower()
    for matches, intent in INTENT_RULES:
        if matches(text):
            return intent
    return Intent.FALLBACK
