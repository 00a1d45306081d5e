"""Static reference data for the local financial assistant.

Everything here is built once at import time and exposed through read-only
containers, so a single instance can be shared by every request.
"""

import random
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class BenchmarkBand(str, Enum):
    """Where an amount sits relative to typical spending in its category."""
    BELOW = "below"
    TYPICAL = "typical"
    ABOVE = "above"


@dataclass(frozen=True)
class Benchmarks:
    low: float
    medium: float
    high: float  # informational, not a cutoff


@dataclass(frozen=True)
class CategoryKnowledge:
    tips: Tuple[str, ...]
    benchmarks: Benchmarks


GENERIC_INSIGHT = "This category reflects your lifestyle priorities."


def classify_benchmark(amount: float, benchmarks: Benchmarks) -> BenchmarkBand:
    """Place an amount into one of three bands.

    `amount <= low` is below average, `amount <= medium` is typical, anything
    larger is above average. `high` does not introduce a fourth band.
    """
    if amount <= benchmarks.low:
        return BenchmarkBand.BELOW
    if amount <= benchmarks.medium:
        return BenchmarkBand.TYPICAL
    return BenchmarkBand.ABOVE


class KnowledgeBase:
    """Read-only lookup tables for strategies, tips, benchmarks and insights."""

    def __init__(
        self,
        budgeting_strategies: Tuple[str, ...],
        saving_tips: Tuple[str, ...],
        spending_insights: Mapping[str, CategoryKnowledge],
        category_insights: Mapping[str, str],
    ):
        self._budgeting_strategies = tuple(budgeting_strategies)
        self._saving_tips = tuple(saving_tips)
        self._spending_insights = MappingProxyType(dict(spending_insights))
        self._category_insights = MappingProxyType(dict(category_insights))

    @property
    def budgeting_strategies(self) -> Tuple[str, ...]:
        return self._budgeting_strategies

    @property
    def saving_tips(self) -> Tuple[str, ...]:
        return self._saving_tips

    @property
    def spending_insights(self) -> Mapping[str, CategoryKnowledge]:
        return self._spending_insights

    def pick_budgeting_strategy(self, rng: random.Random) -> str:
        return rng.choice(self._budgeting_strategies)

    def pick_saving_tip(self, rng: random.Random) -> str:
        return rng.choice(self._saving_tips)

    def benchmarks_for(self, category: Optional[str]) -> Optional[Benchmarks]:
        """Benchmarks for a category, or None if the category is not covered."""
        entry = self._spending_insights.get(category) if category else None
        return entry.benchmarks if entry else None

    def tips_for(self, category: Optional[str]) -> Tuple[str, ...]:
        """Category tips; empty when the category is not covered."""
        entry = self._spending_insights.get(category) if category else None
        return entry.tips if entry else ()

    def insight_for(self, category: Optional[str]) -> str:
        if category and category in self._category_insights:
            return self._category_insights[category]
        return GENERIC_INSIGHT

    def band_for(self, category: Optional[str], amount: float) -> Optional[BenchmarkBand]:
        """Benchmark band for a category amount, or None without benchmarks."""
        benchmarks = self.benchmarks_for(category)
        if benchmarks is None:
            return None
        return classify_benchmark(amount, benchmarks)


KNOWLEDGE_BASE = KnowledgeBase(
    budgeting_strategies=(
        "50/30/20 rule: 50% needs, 30% wants, 20% savings",
        "Zero-based budgeting: Every dollar has a purpose",
        "Envelope method: Allocate specific amounts for categories",
        "Pay yourself first: Save before spending",
        "Automate savings: Set up automatic transfers",
    ),
    saving_tips=(
        "Track every expense for increased awareness",
        "Use the 24-hour rule for non-essential purchases",
        "Cook at home more often to reduce food costs",
        "Review subscriptions monthly and cancel unused ones",
        "Set specific savings goals with deadlines",
    ),
    spending_insights={
        "Food & Dining": CategoryKnowledge(
            tips=("Try meal planning", "Cook in batches", "Use grocery lists", "Compare prices"),
            benchmarks=Benchmarks(low=250, medium=400, high=600),
        ),
        "Transportation": CategoryKnowledge(
            tips=("Use public transport", "Carpool when possible", "Combine errands", "Walk/bike short distances"),
            benchmarks=Benchmarks(low=200, medium=350, high=500),
        ),
        "Shopping": CategoryKnowledge(
            tips=("Make shopping lists", "Compare prices online", "Use cashback apps", "Avoid impulse buying"),
            benchmarks=Benchmarks(low=150, medium=300, high=500),
        ),
        "Entertainment": CategoryKnowledge(
            tips=("Look for free events", "Use streaming instead of theaters", "Happy hour specials", "Group discounts"),
            benchmarks=Benchmarks(low=100, medium=200, high=350),
        ),
    },
    category_insights={
        "Food & Dining": "Food spending suggests you value convenience or dining experiences.",
        "Transportation": "Transport costs indicate mobility priorities - consider alternatives.",
        "Shopping": "Shopping patterns show lifestyle preferences - review necessity vs wants.",
        "Entertainment": "Entertainment spending reflects work-life balance priorities.",
    },
)
