from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


MonthlyTrend = Literal["increasing", "decreasing", "stable"]


class Intent(str, Enum):
    """Purposes a chat message can be classified into."""
    GREETING = "greeting"
    SPENDING = "spending"
    BUDGET = "budget"
    SAVING = "saving"
    CATEGORY = "category"
    PREDICTION = "prediction"
    COMPARISON = "comparison"
    FALLBACK = "fallback"


class CategoryTotal(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    amount: float


class RecentExpense(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float
    category: str
    date: str  # ISO-8601


class FinancialContext(BaseModel):
    """
    Aggregated snapshot of the user's spending for the current request.

    `top_categories` is ordered by amount, largest first, and may be empty
    when there were no expenses in the observation window.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_spent: float = Field(default=0.0, ge=0, alias="totalSpent")
    daily_average: float = Field(default=0.0, alias="dailyAverage")
    top_categories: List[CategoryTotal] = Field(default_factory=list, alias="topCategories")
    recent_expenses: List[RecentExpense] = Field(default_factory=list, alias="recentExpenses")
    monthly_trend: MonthlyTrend = Field(default="stable", alias="monthlyTrend")

    @property
    def top_category(self) -> Optional[CategoryTotal]:
        return self.top_categories[0] if self.top_categories else None


class AIResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    confidence: float = Field(ge=0.0, le=1.0)
    suggestions: Optional[List[str]] = None
    follow_up: Optional[str] = Field(default=None, alias="followUp")


# ============================================
# HTTP payloads
# ============================================

class ExpenseIn(BaseModel):
    """A single expense as sent by the client."""
    amount: float = Field(ge=0)
    category: str = "Other"
    date: datetime
    note: Optional[str] = None


class ChatRequest(BaseModel):
    message: str = ""
    expenses: List[ExpenseIn] = []
    monthly_trend: Optional[MonthlyTrend] = None
    previous_total: Optional[float] = None


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    confidence: Optional[float] = None
    suggestions: Optional[List[str]] = None
    follow_up: Optional[str] = Field(default=None, alias="followUp")
    source: str  # "local_ai" or "fallback"
    intent: Optional[Intent] = None


class ClassifyRequest(BaseModel):
    message: str


class ClassifyResponse(BaseModel):
    intent: Intent
