"""A small printf-style formatter with fixed-width C integer semantics.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%p``,
``%x``, ``%X`` and ``%%``. Any other character after ``%`` is consumed and
produces no output. Integers are reduced to 32 bits (pointers to 64 bits)
before being formatted.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF

NULL_TEXT = "(null)"
NULL_POINTER = "(nil)"


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def hex_length(value: int) -> int:
    """Number of hexadecimal digits needed for ``value`` as a 32-bit unsigned."""
    return max(1, (int(value) & _UINT32_MASK).bit_length() + 3 >> 2)


def format_decimal(value: int) -> str:
    """Format ``value`` as a signed 32-bit decimal integer."""
    return str(_to_int32(int(value)))


def format_unsigned(value: int) -> str:
    """Format ``value`` as an unsigned 32-bit decimal integer."""
    return str(int(value) & _UINT32_MASK)


def format_hex(value: int, upper: bool = False) -> str:
    """Format ``value`` as unsigned 32-bit hexadecimal without a prefix."""
    return format(int(value) & _UINT32_MASK, "X" if upper else "x")


def format_pointer(address: int | None) -> str:
    """Format an address as ``0x`` followed by lowercase hex, or ``(nil)``."""
    if not address:
        return NULL_POINTER
    return "0x" + format(int(address) & _POINTER_MASK, "x")


def format_text(text: str | None) -> str:
    """Return ``text`` itself, or ``(null)`` when it is ``None``."""
    return NULL_TEXT if text is None else str(text)


def _format_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": format_text,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "p": format_pointer,
    "x": lambda v: format_hex(v, False),
    "X": lambda v: format_hex(v, True),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format string at %{spec}"
            ) from None
        yield convert(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    return "".join(_render(fmt, args))