"""Canned replies used when the local assistant cannot answer.

A deliberately simpler responder: four keyword branches, no knowledge base,
no confidence score.
"""

import random
import re
from typing import Optional

from ..schemas.assistant import FinancialContext

DEFAULT_REPLY = "I'm your financial assistant! Let me help you with your money questions. 💰"

_GREETING = re.compile(r"^(hi|hello|hey|sup|good|morning|afternoon|evening)")


def canned_reply(message: str, context: FinancialContext, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    text = (message or "").lower()
    if not text:
        return DEFAULT_REPLY

    total = context.total_spent
    avg_daily = context.daily_average
    top = context.top_category
    top_cat = top.category if top else "unknown"
    top_amount = top.amount if top else 0.0

    if _GREETING.match(text):
        replies = [
            f"👋 Hi there! I'm your AI financial advisor. You've spent ৳{total:.2f} in the last 30 days. "
            f"What would you like to know?",
            f"Hello! 🌟 I'm here to help with your finances. Your top spending category is {top_cat} "
            f"(৳{top_amount:.2f}). What's on your mind?",
            f"Hey! 💫 Ready to dive into your finances? You're averaging ৳{avg_daily:.2f}/day in spending. "
            f"How can I help?",
        ]
    elif any(word in text for word in ("spending", "expense", "spent", "money")):
        replies = [
            f"📊 Your spending snapshot: ৳{total:.2f} total (last 30 days), averaging ৳{avg_daily:.2f}/day. "
            f"{top_cat} is your biggest category at ৳{top_amount:.2f}.",
            f"💸 You've spent ৳{total:.2f} recently. That's about ৳{avg_daily:.2f} per day. "
            f"Your main expense? {top_cat} at ৳{top_amount:.2f}.",
            f"📈 Here's the breakdown: ৳{total:.2f} total spending, ৳{avg_daily:.2f}/day average. "
            f"{top_cat} leads at ৳{top_amount:.2f}. Want to optimize any category?",
        ]
    elif any(word in text for word in ("budget", "save", "saving")):
        replies = [
            f"💡 Budget tip: Try the 50/30/20 rule with your ৳{total:.2f} monthly spending. "
            f"Aim to save ৳{total * 0.2:.2f} per month!",
            f"🎯 Smart saving: With ৳{avg_daily:.2f}/day spending, try setting a daily limit of "
            f"৳{avg_daily * 0.9:.2f} to save 10% automatically!",
            f"💰 Budget strategy: Your current ৳{total:.2f}/month could include ৳{total * 0.2:.2f} for savings. "
            f"Start small, think big!",
        ]
    else:
        replies = [
            f"🤔 Interesting! Based on your ৳{total:.2f} spending pattern, I can help with budgets, "
            f"category analysis, or saving tips. What's your main concern?",
            f"💭 I see you're thinking about finances! Your {top_cat} spending (৳{top_amount:.2f}) caught my eye. "
            f"Want to explore that or something else?",
            f"✨ Good question! With your ৳{avg_daily:.2f}/day spending average, there's always room to optimize. "
            f"What aspect of your finances interests you most?",
        ]
    return rng.choice(replies)
