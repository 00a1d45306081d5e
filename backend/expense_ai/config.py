import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from backend/.env
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path)


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


# HTTP
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if origin.strip()
]

# Context aggregation
CONTEXT_WINDOW_DAYS = _get_int("CONTEXT_WINDOW_DAYS", 30)
TOP_CATEGORY_LIMIT = _get_int("TOP_CATEGORY_LIMIT", 5)
RECENT_EXPENSE_LIMIT = _get_int("RECENT_EXPENSE_LIMIT", 20)
TREND_THRESHOLD_PERCENT = float(os.getenv("TREND_THRESHOLD_PERCENT", "10"))

# Assistant
_seed = os.getenv("ASSISTANT_RANDOM_SEED")
ASSISTANT_RANDOM_SEED = int(_seed) if _seed else None

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Categories an expense can be filed under
CATEGORY_LIST = [
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Healthcare",
    "Education",
    "Travel",
    "Groceries",
    "Personal Care",
    "Other",
]
