"""Response generation for each assistant intent.

Every composer reads only the context fields it needs, picks one of a few
templates with the supplied random source and returns a fixed confidence.
Composers are total: zero totals, empty category lists and categories the
knowledge base does not know all produce neutral wording instead of errors.
"""

import random
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ...schemas.assistant import AIResponse, FinancialContext, Intent
from .knowledge import KNOWLEDGE_BASE, BenchmarkBand, KnowledgeBase

CURRENCY = "৳"
UNKNOWN_CATEGORY = "unknown"
WEEKS_PER_MONTH = 4.3

CONFIDENCE: Dict[Intent, float] = {
    Intent.GREETING: 0.95,
    Intent.CATEGORY: 0.92,
    Intent.SPENDING: 0.90,
    Intent.SAVING: 0.88,
    Intent.BUDGET: 0.85,
    Intent.COMPARISON: 0.80,
    Intent.PREDICTION: 0.75,
    Intent.FALLBACK: 0.70,
}

TREND_MULTIPLIERS = {
    "increasing": 1.1,
    "decreasing": 0.9,
    "stable": 1.0,
}

GENERIC_SPENDING_TIPS = ("Track expenses", "Set limits", "Compare alternatives", "Review regularly")

# (daily comparison, category status, spending remark) per band
_BAND_PHRASES: Dict[BenchmarkBand, Tuple[str, str, str]] = {
    BenchmarkBand.BELOW: (
        "below average (great job!)",
        "excellently managed",
        "You're doing great - below average spending!",
    ),
    BenchmarkBand.TYPICAL: (
        "typical for most people",
        "reasonably controlled",
        "You're in the typical range for this category.",
    ),
    BenchmarkBand.ABOVE: (
        "above average (room for optimization)",
        "higher than typical",
        "This is above average - consider optimizing here.",
    ),
}
_NO_BENCHMARK_PHRASES = (
    "within normal ranges",
    "in normal range",
    "This category varies widely by lifestyle.",
)


def money(amount: float) -> str:
    return f"{CURRENCY}{amount:.2f}"


def share_of_total(amount: float, total: float) -> float:
    """Percentage of `total` taken by `amount`; 0 when there is no total."""
    if total <= 0:
        return 0.0
    return amount / total * 100


def percent(value: float) -> str:
    return f"{value:.1f}%"


def _pick(rng: random.Random, variants: Sequence[str]) -> str:
    return rng.choice(list(variants))


def _top(context: FinancialContext) -> Tuple[str, float]:
    top = context.top_category
    if top is None:
        return UNKNOWN_CATEGORY, 0.0
    return top.category, top.amount


def _top_name(context: FinancialContext) -> Optional[str]:
    top = context.top_category
    return top.category if top else None


def _band_phrases(kb: KnowledgeBase, category: Optional[str], amount: float) -> Tuple[str, str, str]:
    band = kb.band_for(category, amount)
    if band is None:
        return _NO_BENCHMARK_PHRASES
    return _BAND_PHRASES[band]


def trend_remark(trend: str) -> str:
    if trend == "increasing":
        return "📈 Spending is trending upward - consider setting limits."
    if trend == "decreasing":
        return "📉 Great job reducing expenses - keep it up!"
    return "📊 Spending is stable - good consistency."


def trend_advice(trend: str) -> str:
    if trend == "increasing":
        return "consider setting weekly spending limits to manage growth"
    if trend == "decreasing":
        return "you're successfully reducing expenses - maintain this momentum"
    return "consistency is good - now focus on optimization"


def spending_suggestions(kb: KnowledgeBase, category: Optional[str]) -> List[str]:
    return list(kb.tips_for(category) or GENERIC_SPENDING_TIPS)


def compose_greeting(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    category, amount = _top(context)
    variants = [
        f"👋 Hello! I'm your personal financial AI. You've spent {money(context.total_spent)} recently, "
        f"averaging {money(context.daily_average)}/day. Ready to optimize your finances?",
        f"Hi there! 🌟 I see your biggest expense category is {category} at {money(amount)}. "
        f"Let's make your money work smarter!",
        f"Hey! 💰 Your financial snapshot shows {money(context.total_spent)} in recent spending. "
        f"I'm here to help you make every taka count!",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.GREETING],
        follow_up="Ask me about budgeting, saving tips, or spending analysis!",
    )


def compose_spending(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    category, amount = _top(context)
    top_share = percent(share_of_total(amount, context.total_spent))
    trend = trend_remark(context.monthly_trend)
    benchmark_remark = _band_phrases(kb, _top_name(context), amount)[2]

    variants = [
        f"📊 Your spending breakdown: {money(context.total_spent)} total, {money(context.daily_average)}/day average. "
        f"{category} leads at {money(amount)} ({top_share} of total). {trend}",
        f"💸 Financial analysis: You're spending {money(context.daily_average)} daily on average. "
        f"{category} dominates your budget at {money(amount)} ({top_share} of total). {benchmark_remark}",
        f"📈 Money flow report: {money(context.total_spent)} outflow, distributed across "
        f"{len(context.top_categories)} categories. {category} takes {top_share} of your budget "
        f"({money(amount)}). {trend}",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.SPENDING],
        suggestions=spending_suggestions(kb, _top_name(context)),
        follow_up="Want specific tips for your top spending category?",
    )


def compose_budget(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    total = context.total_spent
    strategy = kb.pick_budgeting_strategy(rng)
    weekly = total / WEEKS_PER_MONTH

    variants = [
        f"💡 Budget strategy: {strategy}. With your {money(total)} monthly spending, aim for: "
        f"{money(total * 0.5)} needs, {money(total * 0.3)} wants, {money(total * 0.2)} savings.",
        f"🎯 Smart budgeting: {strategy}. Your current {money(total)} spending suggests "
        f"a weekly budget of {money(weekly)} works well.",
        f"📋 Budget recommendation: {strategy}. Consider tracking weekly: "
        f"you're at {money(weekly)}/week currently.",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.BUDGET],
        suggestions=["Set up automatic savings", "Use budgeting apps", "Review monthly", "Track daily expenses"],
        follow_up="Need help setting up specific budget categories?",
    )


def compose_saving(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    top = context.top_category
    category, amount = _top(context)
    tip = kb.pick_saving_tip(rng)
    potential = amount * 0.15 if top is not None else context.total_spent * 0.10

    if top is not None:
        focus = f"Focus on {category} - a 15% reduction saves {money(potential)}/month!"
    else:
        focus = f"Trimming 10% of your overall spending saves {money(potential)}/month!"

    variants = [
        f"💰 Saving opportunity: {tip}. {focus}",
        f"🌟 Smart saving: {tip}. Your {category} spending has the most potential - try cutting 10-20% there.",
        f"⚡ Quick win: {tip}. Target your biggest category ({category}) for maximum impact - "
        f"even {money(potential)}/month adds up!",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.SAVING],
        suggestions=spending_suggestions(kb, _top_name(context)) + [
            "Try 10% reduction", "Use cashback apps", "Compare prices",
        ],
        follow_up="Want specific strategies for your biggest expense category?",
    )


def compose_category(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    total = context.total_spent
    breakdown = ", ".join(
        f"{item.category}: {money(item.amount)} ({percent(share_of_total(item.amount, total))})"
        for item in context.top_categories[:3]
    ) or f"no categories recorded yet ({money(0)}, {percent(0)})"
    insight = kb.insight_for(_top_name(context))

    variants = [
        f"📈 Category breakdown: {breakdown}. {insight}",
        f"🗂️ Where your money goes: {breakdown}. {insight}",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.CATEGORY],
        suggestions=spending_suggestions(kb, _top_name(context)) + [
            "Set category budgets", "Track weekly", "Find alternatives",
        ],
        follow_up="Which category would you like to optimize first?",
    )


def compose_prediction(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    trend = context.monthly_trend
    predicted = context.total_spent * TREND_MULTIPLIERS.get(trend, 1.0)
    advice = trend_advice(trend)

    variants = [
        f"🔮 Prediction: Based on your {trend} spending trend, next month you'll likely spend around "
        f"{money(predicted)}. Your current pattern suggests {advice}.",
        f"🔮 Forecast: With a {trend} trend, expect roughly {money(predicted)} next month. "
        f"In short, {advice}.",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.PREDICTION],
        suggestions=["Monitor weekly totals", "Set spending alerts", "Plan for variations"],
        follow_up="Want tips to influence this prediction positively?",
    )


def compose_comparison(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    category, amount = _top(context)
    daily_phrase, status_phrase, _ = _band_phrases(kb, _top_name(context), amount)

    variants = [
        f"📊 Comparison: Your {money(context.daily_average)}/day spending is {daily_phrase}. "
        f"{category} at {money(amount)} is {status_phrase} compared to typical ranges.",
        f"⚖️ Benchmark check: {category} at {money(amount)} is {status_phrase}, and your "
        f"{money(context.daily_average)}/day average is {daily_phrase}.",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.COMPARISON],
        follow_up="Want specific recommendations based on these comparisons?",
    )


def compose_fallback(context: FinancialContext, rng: random.Random, kb: KnowledgeBase = KNOWLEDGE_BASE) -> AIResponse:
    category, amount = _top(context)
    variants = [
        f"🤔 I understand you're asking about finances. With your {money(context.total_spent)} spending pattern, "
        f"I can help with budgeting, saving strategies, or category optimization.",
        f"💭 Interesting question! Your {category} spending ({money(amount)}) stands out. "
        f"Want to explore that or ask about something else?",
        f"✨ Good point! Your {money(context.daily_average)}/day average suggests room for optimization. "
        f"What aspect interests you most?",
    ]
    return AIResponse(
        message=_pick(rng, variants),
        confidence=CONFIDENCE[Intent.FALLBACK],
        suggestions=["Ask about budgeting", "Explore saving tips", "Analyze categories", "Get predictions"],
        follow_up="I'm here to help with any financial questions!",
    )


Composer = Callable[[FinancialContext, random.Random, KnowledgeBase], AIResponse]

COMPOSERS: Dict[Intent, Composer] = {
    Intent.GREETING: compose_greeting,
    Intent.SPENDING: compose_spending,
    Intent.BUDGET: compose_budget,
    Intent.SAVING: compose_saving,
    Intent.CATEGORY: compose_category,
    Intent.PREDICTION: compose_prediction,
    Intent.COMPARISON: compose_comparison,
    Intent.FALLBACK: compose_fallback,
}
