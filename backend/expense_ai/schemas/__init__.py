from .assistant import (
    Intent,
    MonthlyTrend,
    CategoryTotal,
    RecentExpense,
    FinancialContext,
    AIResponse,
    ExpenseIn,
    ChatRequest,
    ChatResponse,
    ClassifyRequest,
    ClassifyResponse,
)
from .insights import InsightPeriod, InsightRequest, SpendingInsight
