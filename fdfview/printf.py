"""A small formatted-output routine supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

_UINT_MASK = 0xFFFFFFFF
_INT_SPAN = 2**32
_INT_HALF = 2**31


def _to_int32(value: int) -> int:
    return (value + _INT_HALF) % _INT_SPAN - _INT_HALF


def _require_int(spec: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def format_hex(nbr: int, upper: bool = False) -> str:
    """Render a non-negative integer in hexadecimal without a prefix."""
    nbr = _require_int("x", nbr)
    if nbr < 0:
        raise ValueError(f"hexadecimal output needs a non-negative value, got {nbr}")
    return format(nbr, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Render an address as '0x' followed by lower-case hex; None and 0 give '0x0'."""
    if address is None:
        return "0x0"
    return "0x" + format_hex(address)


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        value = _next_arg(values, spec)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_require_int(spec, value) & 0xFF)
    if spec == "s":
        value = _next_arg(values, spec)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value
    if spec == "p":
        value = _next_arg(values, spec)
        if value is None or isinstance(value, int) and not isinstance(value, bool):
            return format_pointer(value)
        return format_pointer(id(value))
    if spec in ("d", "i"):
        return str(_to_int32(_require_int(spec, _next_arg(values, spec))))
    if spec == "u":
        return str(_require_int(spec, _next_arg(values, spec)) & _UINT_MASK)
    if spec in ("x", "X"):
        value = _require_int(spec, _next_arg(values, spec)) & _UINT_MASK
        return format_hex(value, upper=spec == "X")
    # Unknown conversions produce nothing and consume no argument.
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the given arguments.

    Integers for %d and %i wrap to 32-bit signed values, and those for %u, %x
    and %X to 32-bit unsigned values. A '%' at the very end is kept literally.
    """
    values = iter(args)
    pieces = []
    i = 0
    end = len(fmt)
    while i < end:
        ch = fmt[i]
        if ch == "%" and i + 1 < end:
            pieces.append(_convert(fmt[i + 1], values))
            i += 2
        else:
            pieces.append(ch)
            i += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the characters written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)