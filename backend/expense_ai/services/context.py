from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from .. import config
from ..schemas.assistant import (
    CategoryTotal,
    ExpenseIn,
    FinancialContext,
    MonthlyTrend,
    RecentExpense,
)


def _naive_utc(value: datetime) -> datetime:
    """Drop tzinfo after converting to UTC. Naive values are taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def detect_trend(
    current: float,
    previous: float,
    threshold: float = config.TREND_THRESHOLD_PERCENT,
) -> MonthlyTrend:
    """Label the change between two period totals."""
    if previous > 0:
        change = ((current - previous) / previous) * 100
    else:
        change = 100.0 if current > 0 else 0.0

    if change > threshold:
        return "increasing"
    if change < -threshold:
        return "decreasing"
    return "stable"


def expenses_in_window(
    expenses: Sequence[ExpenseIn],
    start: datetime,
    end: datetime,
) -> List[ExpenseIn]:
    start, end = _naive_utc(start), _naive_utc(end)
    return [exp for exp in expenses if start <= _naive_utc(exp.date) <= end]


def category_totals(expenses: Sequence[ExpenseIn]) -> List[CategoryTotal]:
    """Per-category totals, largest first."""
    totals: Dict[str, float] = defaultdict(float)
    for exp in expenses:
        totals[exp.category] += exp.amount
    ranked = sorted(totals.items(), key=lambda x: x[1], reverse=True)
    return [CategoryTotal(category=cat, amount=round(amount, 2)) for cat, amount in ranked]


def build_financial_context(
    expenses: Sequence[ExpenseIn],
    now: Optional[datetime] = None,
    window_days: int = config.CONTEXT_WINDOW_DAYS,
    monthly_trend: Optional[MonthlyTrend] = None,
    previous_total: Optional[float] = None,
) -> FinancialContext:
    """
    Aggregate raw expenses into the snapshot the assistant reads.

    Only expenses from the last `window_days` are considered. The trend is
    taken as given, derived from `previous_total` when supplied, or "stable".
    """
    now = now or datetime.now(timezone.utc)
    window_days = max(window_days, 1)
    window = expenses_in_window(expenses, now - timedelta(days=window_days), now)

    total_spent = sum(exp.amount for exp in window)
    recent = sorted(window, key=lambda exp: _naive_utc(exp.date), reverse=True)[:config.RECENT_EXPENSE_LIMIT]

    if monthly_trend is None:
        monthly_trend = detect_trend(total_spent, previous_total) if previous_total is not None else "stable"

    return FinancialContext(
        total_spent=round(total_spent, 2),
        daily_average=round(total_spent / window_days, 2),
        top_categories=category_totals(window)[:config.TOP_CATEGORY_LIMIT],
        recent_expenses=[
            RecentExpense(amount=exp.amount, category=exp.category, date=exp.date.isoformat())
            for exp in recent
        ],
        monthly_trend=monthly_trend,
    )
