import random
from datetime import datetime

import pytest

from expense_ai.schemas.assistant import CategoryTotal, ExpenseIn, FinancialContext


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def empty_context():
    return FinancialContext(total_spent=0, daily_average=0, top_categories=[], monthly_trend="stable")


@pytest.fixture
def food_context():
    return FinancialContext(
        total_spent=1000,
        daily_average=33.33,
        top_categories=[
            CategoryTotal(category="Food & Dining", amount=500),
            CategoryTotal(category="Transportation", amount=300),
            CategoryTotal(category="Shopping", amount=150),
            CategoryTotal(category="Other", amount=50),
        ],
        monthly_trend="increasing",
    )


@pytest.fixture
def now():
    return datetime(2026, 10, 15, 12, 0, 0)


@pytest.fixture
def expenses():
    return [
        ExpenseIn(amount=120.0, category="Food & Dining", date=datetime(2026, 10, 14, 19, 30)),
        ExpenseIn(amount=80.0, category="Food & Dining", date=datetime(2026, 10, 2, 13, 0)),
        ExpenseIn(amount=150.0, category="Transportation", date=datetime(2026, 10, 10, 8, 0)),
        ExpenseIn(amount=40.0, category="Entertainment", date=datetime(2026, 9, 20, 21, 0)),
        # Outside the 30-day window
        ExpenseIn(amount=999.0, category="Shopping", date=datetime(2026, 8, 1, 10, 0)),
    ]
