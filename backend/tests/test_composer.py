"""Tests for the per-intent response composers and the assistant facade."""

import random

import pytest

from expense_ai.schemas.assistant import CategoryTotal, FinancialContext, Intent
from expense_ai.services.assistant import LocalFinancialAssistant
from expense_ai.services.assistant.knowledge import KNOWLEDGE_BASE
from expense_ai.services.assistant.composer import (
    COMPOSERS,
    CONFIDENCE,
    compose_budget,
    compose_category,
    compose_comparison,
    compose_prediction,
    compose_saving,
    compose_spending,
    share_of_total,
)


class PickVariant(random.Random):
    """Random source that always returns the n-th option."""

    def __init__(self, index: int):
        super().__init__(0)
        self.index = index

    def choice(self, seq):
        return seq[self.index % len(seq)]


def all_variants(composer, context):
    """Every template a composer can produce for a context."""
    return [composer(context, PickVariant(i)).message for i in range(3)]


def _context(top, total, trend="stable", daily=10.0):
    return FinancialContext(
        total_spent=total,
        daily_average=daily,
        top_categories=[CategoryTotal(category=c, amount=a) for c, a in top],
        monthly_trend=trend,
    )


class TestSpending:

    def test_reports_top_amount_and_share(self, food_context):
        """Test the documented example: 500 of 1000 is 50.0%."""
        for message in all_variants(compose_spending, food_context):
            assert "500.00" in message
            assert "50.0%" in message

    def test_confidence(self, food_context, rng):
        assert compose_spending(food_context, rng).confidence == 0.90

    def test_zero_total_share(self):
        context = _context([("Food & Dining", 0)], 0)
        for message in all_variants(compose_spending, context):
            assert "0.0%" in message

    def test_suggestions_use_category_tips(self, food_context, rng):
        response = compose_spending(food_context, rng)
        assert response.suggestions[0] == "Try meal planning"

    def test_unknown_category_gets_generic_tips(self, rng):
        response = compose_spending(_context([("Travel", 80)], 100), rng)
        assert response.suggestions == ["Track expenses", "Set limits", "Compare alternatives", "Review regularly"]

    def test_trend_remark(self):
        messages = all_variants(compose_spending, _context([("Shopping", 10)], 100, trend="decreasing"))
        assert any("Great job reducing expenses" in m for m in messages)


class TestBudget:

    def test_split_and_weekly_figures(self, food_context):
        messages = all_variants(compose_budget, food_context)
        assert "500.00" in messages[0] and "300.00" in messages[0] and "200.00" in messages[0]
        assert "232.56" in messages[1]
        assert "232.56" in messages[2]

    def test_strategy_from_knowledge_base(self, food_context, rng):
        response = compose_budget(food_context, rng)
        assert any(s in response.message for s in KNOWLEDGE_BASE.budgeting_strategies)
        assert response.confidence == 0.85


class TestSaving:

    def test_fifteen_percent_of_top_category(self, food_context):
        messages = all_variants(compose_saving, food_context)
        assert "75.00" in messages[0]
        assert "75.00" in messages[2]
        assert "Food & Dining" in messages[1]

    def test_ten_percent_of_total_without_categories(self):
        context = _context([], 200)
        messages = all_variants(compose_saving, context)
        assert "20.00" in messages[0]
        assert "20.00" in messages[2]

    def test_suggestions_extend_tips(self, food_context, rng):
        suggestions = compose_saving(food_context, rng).suggestions
        assert suggestions[:4] == ["Try meal planning", "Cook in batches", "Use grocery lists", "Compare prices"]
        assert suggestions[-3:] == ["Try 10% reduction", "Use cashback apps", "Compare prices"]


class TestCategory:

    def test_lists_top_three_with_shares(self, food_context):
        for message in all_variants(compose_category, food_context):
            assert "Food & Dining: ৳500.00 (50.0%)" in message
            assert "Transportation: ৳300.00 (30.0%)" in message
            assert "Shopping: ৳150.00 (15.0%)" in message
            assert "Other" not in message
            assert "dining experiences" in message

    def test_generic_insight_for_unknown_top(self, rng):
        response = compose_category(_context([("Education", 40)], 40), rng)
        assert "reflects your lifestyle priorities" in response.message
        assert response.suggestions[-3:] == ["Set category budgets", "Track weekly", "Find alternatives"]


class TestPrediction:

    @pytest.mark.parametrize("trend,expected", [
        ("stable", "200.00"),
        ("increasing", "220.00"),
        ("decreasing", "180.00"),
    ])
    def test_trend_multiplier(self, trend, expected):
        for message in all_variants(compose_prediction, _context([], 200, trend=trend)):
            assert expected in message

    def test_documented_example(self):
        assistant = LocalFinancialAssistant(rng=random.Random(1))
        response = assistant.generate_response("predict next month", _context([], 200))
        assert "200.00" in response.message
        assert response.confidence == 0.75


class TestComparison:

    @pytest.mark.parametrize("top,status", [
        (("Entertainment", 50), "excellently managed"),
        (("Entertainment", 150), "reasonably controlled"),
        (("Food & Dining", 500), "higher than typical"),
        (("Healthcare", 500), "in normal range"),
    ])
    def test_band_wording(self, top, status):
        for message in all_variants(compose_comparison, _context([top], 1000)):
            assert status in message

    def test_no_benchmark_daily_phrase(self):
        for message in all_variants(compose_comparison, _context([("Healthcare", 500)], 1000)):
            assert "within normal ranges" in message


class TestDegenerateContexts:
    """Composers never fail or leak undefined values."""

    @pytest.mark.parametrize("intent", list(Intent))
    def test_empty_context(self, intent, empty_context):
        for i in range(3):
            response = COMPOSERS[intent](empty_context, PickVariant(i))
            assert response.message
            for bad in ("৳nan", "৳inf", "৳-inf", "nan%", "None"):
                assert bad not in response.message
            assert response.confidence == CONFIDENCE[intent]

    def test_empty_context_percentages(self, empty_context):
        for message in all_variants(compose_spending, empty_context) + all_variants(compose_category, empty_context):
            assert "0.0%" in message

    def test_share_of_total_guard(self):
        assert share_of_total(50, 0) == 0.0
        assert share_of_total(25, 100) == 25.0


class TestAssistant:
    """Tests for classify-then-compose dispatch."""

    @pytest.mark.parametrize("message,intent,confidence", [
        ("hello", Intent.GREETING, 0.95),
        ("category breakdown", Intent.CATEGORY, 0.92),
        ("how much did I spend", Intent.SPENDING, 0.90),
        ("how can I save", Intent.SAVING, 0.88),
        ("make a budget", Intent.BUDGET, 0.85),
        ("compare me", Intent.COMPARISON, 0.80),
        ("forecast", Intent.PREDICTION, 0.75),
        ("tell me a joke", Intent.FALLBACK, 0.70),
    ])
    def test_confidence_table(self, message, intent, confidence, food_context, empty_context):
        assistant = LocalFinancialAssistant(rng=random.Random(0))
        assert assistant.classify(message) == intent
        assert assistant.generate_response(message, food_context).confidence == confidence
        assert assistant.generate_response(message, empty_context).confidence == confidence

    def test_spending_example(self, food_context):
        assistant = LocalFinancialAssistant(rng=random.Random(5))
        response = assistant.generate_response("how much did I spend", food_context)
        assert "500.00" in response.message
        assert "50.0%" in response.message
        assert response.confidence == 0.90

    def test_greeting_on_empty_context(self, empty_context):
        assistant = LocalFinancialAssistant(rng=random.Random(5))
        response = assistant.generate_response("hello", empty_context)
        assert response.message
        assert response.confidence == 0.95
        assert response.follow_up

    def test_respond_returns_intent_with_reply(self, food_context):
        assistant = LocalFinancialAssistant(rng=random.Random(2))
        intent, response = assistant.respond("budget to save more", food_context)
        assert intent == Intent.BUDGET
        assert response.confidence == CONFIDENCE[Intent.BUDGET]

    def test_seeded_assistants_agree(self, food_context):
        first = LocalFinancialAssistant(rng=random.Random(9))
        second = LocalFinancialAssistant(rng=random.Random(9))
        for message in ("hi", "budget", "save", "what now"):
            assert first.generate_response(message, food_context) == second.generate_response(message, food_context)

    def test_fallback_suggestions(self, food_context, rng):
        response = LocalFinancialAssistant(rng=rng).generate_response("tell me a joke", food_context)
        assert response.suggestions == ["Ask about budgeting", "Explore saving tips", "Analyze categories", "Get predictions"]
