"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from snowball_planner.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_max_months() -> int:
    """Simulation month cap for the engine"""
    return settings.max_months


def get_max_debts() -> int:
    return settings.max_debts
