"""Display formatting with placeholders for absent values."""

from __future__ import annotations

PLACEHOLDER = "N/A"


def format_money(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"${value:,.2f}"


def format_change(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:+,.2f}"


def format_percent(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:+.2f}%"


def format_volume(value: int | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:,}"
