"""Marketplace seller profitability planner."""

__version__ = "0.1.0"
