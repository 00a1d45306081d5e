import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from ..schemas.assistant import ExpenseIn
from ..schemas.insights import InsightPeriod, SpendingInsight
from .context import category_totals, expenses_in_window

logger = logging.getLogger(__name__)

HIGH_DAILY_SPEND = 50.0
EMPTY_INSIGHT_MESSAGE = "Start tracking your expenses to get personalized insights!"


def get_period_start(period: InsightPeriod, now: datetime) -> datetime:
    """Start of the current week (Sunday), year or month."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        days_since_sunday = (now.weekday() + 1) % 7
        return midnight - timedelta(days=days_since_sunday)
    if period == "year":
        return midnight.replace(month=1, day=1)
    return midnight.replace(day=1)


def build_spending_insight(
    expenses: Sequence[ExpenseIn],
    period: InsightPeriod = "month",
    now: Optional[datetime] = None,
) -> SpendingInsight:
    """Summarise spending for the period with one piece of advice."""
    now = now or datetime.now(timezone.utc)
    start = get_period_start(period, now)
    in_period = expenses_in_window(expenses, start, now)

    if not in_period:
        return SpendingInsight(
            message=EMPTY_INSIGHT_MESSAGE,
            category="Other",
            type="tip",
            generated_at=now,
            period=period,
        )

    total_spent = sum(exp.amount for exp in in_period)
    days = max(1, math.ceil((now - start).total_seconds() / 86400))
    daily_average = total_spent / days
    top_categories = category_totals(in_period)[:3]
    top = top_categories[0] if top_categories else None

    summary = f"You spent ৳{total_spent:.2f} this {period}, averaging ৳{daily_average:.2f} per day."
    if top is not None:
        advice = (
            f"Your top spending category is {top.category} (৳{top.amount:.2f}). "
            f"Consider reviewing these expenses for potential savings."
        )
    else:
        advice = "Great job tracking your expenses! Keep monitoring your spending to identify patterns."

    high_spend = daily_average > HIGH_DAILY_SPEND
    if high_spend:
        trends = "Your daily spending is above average. Consider setting a daily budget to better control expenses."
    else:
        trends = "Your spending looks well-controlled. Keep up the good financial habits!"

    logger.info(f"[Insights] {period} insight over {len(in_period)} expenses, daily average {daily_average:.2f}")

    return SpendingInsight(
        message=f"{summary} {advice}",
        category=top.category if top else "Other",
        type="warning" if high_spend else "tip",
        generated_at=now,
        period=period,
        summary=summary,
        advice=advice,
        trends=trends,
        total_spent=round(total_spent, 2),
        daily_average=round(daily_average, 2),
    )
