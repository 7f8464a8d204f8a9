#!/usr/bin/env python3
"""
Terminal styling helpers for benchmark output.

ANSI colors are used when stdout is a TTY; NO_COLOR disables them and
FORCE_COLOR enables them regardless.
"""

from __future__ import annotations

import os
import re
import sys
from enum import Enum


class Color(Enum):
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    GREY = "\033[90m"
    BRIGHT_GREEN = "\033[92m"
    MAGENTA = "\033[95m"


def _colors_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return sys.stdout.isatty()


COLORS_ENABLED = _colors_enabled()
RULE_WIDTH = 64

_ANSI = re.compile(r"\033\[[0-9;]*m")


def c(color: Color, text: str) -> str:
    """Apply color to text if colors are enabled."""
    if not COLORS_ENABLED:
        return text
    return f"{color.value}{text}{Color.RESET.value}"


def visible_len(text: str) -> int:
    return len(_ANSI.sub("", text))


def _rule(title: str = "", color: Color = Color.GREY) -> str:
    if not title:
        return c(color, "─" * RULE_WIDTH)
    head = f"── {title} "
    return c(color, head + "─" * max(0, RULE_WIDTH - len(head)))


def banner(title: str, subtitle: str = "") -> None:
    print()
    print(_rule(color=Color.MAGENTA))
    print(c(Color.BOLD, title.center(RULE_WIDTH)))
    if subtitle:
        print(c(Color.DIM, subtitle.center(RULE_WIDTH)))
    print(_rule(color=Color.MAGENTA))


def section_header(title: str, subtitle: str = "") -> None:
    print()
    print(_rule(title, Color.CYAN))
    if subtitle:
        print("  " + c(Color.DIM, subtitle))
    print()


def info_line(label: str, value: str) -> None:
    print(f"  {c(Color.DIM, label + ':')} {value}")


def success(msg: str) -> None:
    print(f"  {c(Color.GREEN, '✓')} {msg}")


def warning(msg: str) -> None:
    print(f"  {c(Color.YELLOW, '⚠')} {c(Color.YELLOW, msg)}")


def done(msg: str = "Done!") -> None:
    print()
    print(_rule(color=Color.GREEN))
    print(c(Color.GREEN, f"✓ {msg}".center(RULE_WIDTH)))
    print(_rule(color=Color.GREEN))
    print()


class Table:
    """Fixed-width table; columns are (header, width, align) tuples."""

    def __init__(self, columns: list[tuple[str, int, str]]):
        self.columns = columns

    @staticmethod
    def _cell(value: str, width: int, align: str) -> str:
        pad = max(0, width - visible_len(value))
        if align == "right":
            return " " * pad + value
        return value + " " * pad

    def print_header(self) -> None:
        cells = [self._cell(c(Color.DIM, h), w, a) for h, w, a in self.columns]
        print("  " + "  ".join(cells))
        print("  " + "  ".join(c(Color.GREY, "─" * w) for _, w, _ in self.columns))

    def print_row(self, values: list[str]) -> None:
        cells = [
            self._cell(values[i] if i < len(values) else "", w, a)
            for i, (_, w, a) in enumerate(self.columns)
        ]
        print("  " + "  ".join(cells))


def format_time_us(seconds: float) -> str:
    """Format a per-call time in microseconds with color coding."""
    us = seconds * 1e6
    if us < 1:
        return c(Color.GREEN, f"{us:.3f}μs")
    if us < 10:
        return c(Color.BRIGHT_GREEN, f"{us:.2f}μs")
    if us < 1000:
        return c(Color.YELLOW, f"{us:.1f}μs")
    return c(Color.RED, f"{us / 1000:.2f}ms")


def format_ratio(ratio: float) -> str:
    """Format a slowdown/speedup ratio; >1 means mathkit is slower."""
    if ratio <= 1.5:
        return c(Color.GREEN, f"{ratio:.2f}×")
    if ratio <= 5.0:
        return c(Color.YELLOW, f"{ratio:.2f}×")
    return c(Color.RED, f"{ratio:.2f}×")


def format_number(n: int | float) -> str:
    if isinstance(n, float):
        return f"{n:,.2f}"
    return f"{n:,}"
