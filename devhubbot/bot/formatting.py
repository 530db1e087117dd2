"""Render data-service results as chat replies."""

from __future__ import annotations


def format_user_result(username: str, result: object) -> str:
    """Single-line reply for streaks, totals and repositories."""
    return f"user {username} {result}"


def format_user_table(username: str, result: object) -> str:
    """Reply with a multi-line rendering below the username."""
    return f"user {username}\n\n{result}"
