import logging

from fastapi import APIRouter, HTTPException

from ..schemas.assistant import ChatRequest, ChatResponse, ClassifyRequest, ClassifyResponse
from ..schemas.insights import InsightRequest, SpendingInsight
from ..services.assistant import classify_intent, local_assistant
from ..services.context import build_financial_context
from ..services.fallback import canned_reply
from ..services.insights import build_spending_insight

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI Assistant"])


@router.post("/chat", response_model=ChatResponse, response_model_by_alias=True, response_model_exclude_none=True)
def chat(chat_request: ChatRequest):
    """
    Ask the local financial assistant a question.

    The expenses sent with the request are aggregated into a 30-day snapshot,
    the message is classified into an intent and a templated reply is built
    locally. No external API is called.

    **Example queries:**
    - "Hello!"
    - "How much did I spend this month?"
    - "Help me plan a budget"
    - "Where can I cut costs?" (classified as spending: "cost" is checked first)
    - "Show my category breakdown"
    - "Predict next month"
    - "How do I compare to average?"
    """
    message = chat_request.message.strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")

    context = build_financial_context(
        chat_request.expenses,
        monthly_trend=chat_request.monthly_trend,
        previous_total=chat_request.previous_total,
    )
    logger.info(f"[Chat] Request: {message[:50]}... over {len(chat_request.expenses)} expenses")

    try:
        intent, reply = local_assistant.respond(message, context)
    except Exception as e:
        logger.error(f"[Chat] Local assistant failed, using canned fallback: {e}")
        return ChatResponse(message=canned_reply(message, context), source="fallback")

    return ChatResponse(
        message=reply.message,
        confidence=reply.confidence,
        suggestions=reply.suggestions,
        follow_up=reply.follow_up,
        source="local_ai",
        intent=intent,
    )


@router.post("/insights", response_model=SpendingInsight)
def insights(insight_request: InsightRequest):
    """Summarise spending for the current week, month or year."""
    return build_spending_insight(insight_request.expenses, period=insight_request.period)


@router.post("/classify", response_model=ClassifyResponse)
def classify(classify_request: ClassifyRequest):
    """Show which intent a message maps to."""
    return ClassifyResponse(intent=classify_intent(classify_request.message))
