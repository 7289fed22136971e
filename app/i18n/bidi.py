"""Direction-aware helpers for consumers that mirror spacing, icons or fonts."""

from __future__ import annotations

from typing import TypeVar

from app.i18n import Direction

T = TypeVar("T")


def mirror(direction: Direction, ltr_value: T, rtl_value: T) -> T:
    """Pick *rtl_value* under right-to-left layout, *ltr_value* otherwise."""
    return rtl_value if direction == "rtl" else ltr_value


def script_class(direction: Direction, heading: bool = False) -> str:
    """CSS class selecting the Arabic typeface under RTL; empty under LTR."""
    if direction != "rtl":
        return ""
    return "font-arabic-heading" if heading else "font-arabic"
