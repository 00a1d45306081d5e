from datetime import datetime
from pydantic import BaseModel
from typing import List, Literal, Optional

from .assistant import ExpenseIn


InsightPeriod = Literal["week", "month", "year"]


class InsightRequest(BaseModel):
    expenses: List[ExpenseIn] = []
    period: InsightPeriod = "month"


class SpendingInsight(BaseModel):
    message: str
    category: str
    type: str  # "tip", "warning" or "recommendation"
    generated_at: datetime
    period: InsightPeriod
    summary: Optional[str] = None
    advice: Optional[str] = None
    trends: Optional[str] = None
    total_spent: float = 0.0
    daily_average: float = 0.0
