from .assistant import LocalFinancialAssistant, local_assistant, classify_intent
from .context import build_financial_context, category_totals, detect_trend, expenses_in_window
from .fallback import canned_reply
from .insights import build_spending_insight, get_period_start
