"""Application cache – canonical text form of key inputs.

Every input is rendered to text with a fixed, locale-independent rule and the
rendered parts are joined with the separator::

    canonicalize(["Hello", 123])              -> "Hello~123"
    canonicalize([None, None])                -> "~"
    canonicalize(None, label="Widget")        -> "Widget"
    canonicalize([1.0, 23.6], label="Widget") -> "Widget~1~23.6"
"""
from __future__ import annotations

import enum
import math
from decimal import Decimal
from typing import Sequence

DEFAULT_SEPARATOR = "~"


def render_value(value: object) -> str:
    """Render a single key input.

    ``None`` renders as empty text and booleans as ``True``/``False``. Floats
    use the shortest round-trip digits in fixed-point notation, dropping a
    zero fractional part (``78.0`` -> ``"78"``). Decimals keep their scale.
    Negative zero of either type renders unsigned.
    Enum members render as their value. Everything else goes through ``str``.
    """
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return render_value(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _render_float(value)
    if isinstance(value, Decimal):
        return _render_decimal(value)
    return str(value)


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # -0.0 == 0.0
        return "0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _render_decimal(value: Decimal) -> str:
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_zero():
        value = value.copy_abs()
    return format(value, "f")


def canonicalize(
    inputs: Sequence[object] | None,
    separator: str = DEFAULT_SEPARATOR,
    label: str | None = None,
) -> str | None:
    """Join rendered *inputs* with *separator*, optionally led by *label*.

    Returns ``None`` only when *inputs* is ``None`` and no label is given; an
    empty sequence yields ``""``. The separator only appears between elements.
    """
    if inputs is None:
        return label
    if isinstance(inputs, (str, bytes)):
        raise TypeError("inputs must be a sequence of values, not a single string")
    parts = [render_value(item) for item in inputs]
    if label is not None:
        parts.insert(0, label)
    return separator.join(parts)


__all__ = ["DEFAULT_SEPARATOR", "canonicalize", "render_value"]
