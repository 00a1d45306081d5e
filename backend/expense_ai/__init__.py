"""Expense tracker backend with a local rule-based financial assistant."""
