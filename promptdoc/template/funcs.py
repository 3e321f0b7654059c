"""Formatting, comparison and math helpers available to every template.

The helpers are plain functions; ``DEFAULT_FUNCS`` maps the names templates
call them by (``{{formatCurrency(.Balance)}}``) to the implementations.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, Dict, Iterable

from jinja2 import Undefined

from ..schema.fields import to_wire

GREEN = "🟢"
RED = "🔴"
YELLOW = "🟡"
WHITE = "⚪"

ARROW_UP = "📈"
ARROW_DOWN = "📉"
ARROW_FLAT = "➡️"

_SENTIMENT_COLORS = {
    "bullish": GREEN,
    "positive": GREEN,
    "up": GREEN,
    "bearish": RED,
    "negative": RED,
    "down": RED,
    "neutral": YELLOW,
    "flat": YELLOW,
}


def format_currency(value: float) -> str:
    """Format a dollar amount with K/M suffixes: ``$1.50M``, ``$5.50K``, ``$99.99``."""
    if value >= 1_000_000:
        return f"${value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"${value / 1_000:.2f}K"
    return f"${value:.2f}"


def format_percent(value: float) -> str:
    """Format a signed percentage: ``+5.25%``, ``-2.50%``."""
    if value >= 0:
        return f"+{value:.2f}%"
    return f"{value:.2f}%"


def format_float(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def color_code(sentiment: str) -> str:
    """Return a colored marker for a sentiment word."""
    return _SENTIMENT_COLORS.get(sentiment, WHITE)


def trend_indicator(current: float, previous: float) -> str:
    if current > previous:
        return ARROW_UP
    if current < previous:
        return ARROW_DOWN
    return ARROW_FLAT


def is_bullish(price: float, ema: float) -> bool:
    """Price above its EMA."""
    return price > ema


def is_bearish(price: float, ema: float) -> bool:
    """Price below its EMA."""
    return price < ema


def is_overbought(rsi: float) -> bool:
    return rsi > 70


def is_oversold(rsi: float) -> bool:
    return rsi < 30


def join_floats(values: Iterable[float], sep: str) -> str:
    return sep.join(f"{value:.2f}" for value in values)


def join_ints(values: Iterable[int], sep: str) -> str:
    return sep.join(f"{value:d}" for value in values)


def join_strings(values: Iterable[str], sep: str) -> str:
    return sep.join(values)


def to_json(value: Any) -> str:
    """Compact JSON text, or an inline ``error: ...`` string when not serialisable."""
    try:
        return json.dumps(
            value, default=_json_default, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        )
    except (TypeError, ValueError) as exc:
        return f"error: {exc}"


def to_json_pretty(value: Any) -> str:
    """Indented JSON text, or an inline ``error: ...`` string when not serialisable."""
    try:
        return json.dumps(
            value, default=_json_default, ensure_ascii=False, allow_nan=False, indent=2
        )
    except (TypeError, ValueError) as exc:
        return f"error: {exc}"


def range_format(low: Any, high: Any, unit: str) -> str:
    """``range(1, 20, "x")`` -> ``1-20x``."""
    return f"{_plain(low)}-{_plain(high)}{unit}"


def default(default_value: Any, value: Any) -> Any:
    """Return ``default_value`` when ``value`` is empty, zero, false or missing."""
    if value is None or isinstance(value, Undefined):
        return default_value
    if isinstance(value, (str, bool, int, float)) and not value:
        return default_value
    return value


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Division that yields 0 for a zero divisor."""
    if b == 0:
        return 0
    return a / b


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def absolute(value: float) -> float:
    return -value if value < 0 else value


def minimum(a: float, b: float) -> float:
    return a if a < b else b


def maximum(a: float, b: float) -> float:
    return a if a > b else b


def _plain(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_wire(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


DEFAULT_FUNCS: Dict[str, Callable[..., Any]] = {
    # formatting
    "formatCurrency": format_currency,
    "formatPercent": format_percent,
    "formatFloat": format_float,
    # indicators
    "colorCode": color_code,
    "trendIndicator": trend_indicator,
    "isBullish": is_bullish,
    "isBearish": is_bearish,
    "isOverbought": is_overbought,
    "isOversold": is_oversold,
    # sequences
    "join": join_floats,
    "joinFloats": join_floats,
    "joinInts": join_ints,
    "joinStrings": join_strings,
    # serialisation
    "toJSON": to_json,
    "toJSONPretty": to_json_pretty,
    "range": range_format,
    "default": default,
    # math
    "multiply": multiply,
    "divide": divide,
    "add": add,
    "subtract": subtract,
    "abs": absolute,
    "min": minimum,
    "max": maximum,
}


__all__ = [
    "DEFAULT_FUNCS",
    "absolute",
    "add",
    "color_code",
    "default",
    "divide",
    "format_currency",
    "format_float",
    "format_percent",
    "is_bearish",
    "is_bullish",
    "is_overbought",
    "is_oversold",
    "join_floats",
    "join_ints",
    "join_strings",
    "maximum",
    "minimum",
    "multiply",
    "range_format",
    "subtract",
    "to_json",
    "to_json_pretty",
    "trend_indicator",
]
