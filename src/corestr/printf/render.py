"""Bounded rendering of printf templates.

`render` is the snprintf of this package: it writes at most
`scratch.capacity` characters and always reports the full length the
output needs, so callers can detect truncation and retry with more room.
A negative `required` signals an encoding error (template and arguments
do not fit together, or the output would not be valid text).
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .template import (
    STAR,
    INTEGER_CONVERSIONS,
    FLOAT_CONVERSIONS,
    ConversionSpec,
    Literal,
    TemplateError,
    parse_template,
)


# Bit width an integer argument is reduced to, per length modifier.
LENGTH_BITS = {
    "hh": 8,
    "h": 16,
    None: 32,
    "l": 64,
    "ll": 64,
    "j": 64,
    "z": 64,
    "t": 64,
    "L": 64,
}

_SURROGATE_RE = re.compile("[\ud800-\udfff]")
_HEX_FLOAT_RE = re.compile(r"0x([01])\.([0-9a-f]+)p([+-]\d+)")

# Hex digits in the fraction of a binary64 value.
_FRACTION_DIGITS = 13


class ScratchBuffer:
    """Fixed-capacity storage for a single render attempt.

    Writes past the capacity are dropped. Use it as a context manager so
    the content is released on every exit path.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._parts: list[str] = []
        self._size = 0

    def write(self, text: str) -> None:
        room = self.capacity - self._size
        if room <= 0 or not text:
            return
        if len(text) > room:
            text = text[:room]
        self._parts.append(text)
        self._size += len(text)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def release(self) -> None:
        self._parts.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __enter__(self) -> "ScratchBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


@dataclass
class RenderResult:
    """Outcome of one render attempt."""
    required: int
    text: str = ""
    error: Optional[str] = None

    @property
    def truncated(self) -> bool:
        return self.required > len(self.text)


class _Arguments:
    """Cursor over the caller's argument list."""

    def __init__(self, args: Sequence[Any]):
        self._args = list(args)
        self._index = 0

    def take(self, spec: ConversionSpec, what: str = "value") -> Any:
        if self._index >= len(self._args):
            raise TemplateError(
                f"missing {what} argument for %{spec.conversion} "
                f"(argument {self._index + 1}, {len(self._args)} given)"
            )
        value = self._args[self._index]
        self._index += 1
        return value


def render(scratch: ScratchBuffer, template: str, args: Sequence[Any] = ()) -> RenderResult:
    """Render `template` with `args` into `scratch`.

    Returns the length the complete output needs, which may exceed the
    scratch capacity, or a negative length with an error message.
    """
    arguments = _Arguments(args)
    required = 0

    try:
        for piece in parse_template(template):
            if isinstance(piece, Literal):
                chunk = piece.text
                _check_text(chunk)
            else:
                chunk = convert(piece, arguments)
            scratch.write(chunk)
            required += len(chunk)
    except TemplateError as e:
        return RenderResult(required=-1, error=str(e))

    return RenderResult(required=required, text=scratch.getvalue())


def convert(spec: ConversionSpec, arguments: _Arguments) -> str:
    """Render one conversion, consuming its arguments."""
    width = spec.width
    left = spec.left_justify
    if width == STAR:
        width = _int_argument(arguments.take(spec, "width"), "width")
        if width < 0:
            left = True
            width = -width

    precision = spec.precision
    if precision == STAR:
        precision = _int_argument(arguments.take(spec, "precision"), "precision")
        if precision < 0:
            precision = None

    value = arguments.take(spec)
    conversion = spec.conversion

    if conversion in INTEGER_CONVERSIONS:
        text = _format_integer(spec, value, width, precision, left)
    elif conversion in FLOAT_CONVERSIONS:
        text = _format_float(spec, value, width, precision, left)
    elif conversion == "c":
        text = _format_char(value)
    elif conversion == "s":
        text = _format_string(value, precision)
    else:
        text = _format_pointer(value)

    return _pad(text, width, left)


def _int_argument(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TemplateError(f"'*' {what} expects an int, got {type(value).__name__}")
    return value


def _pad(text: str, width: Optional[int], left: bool) -> str:
    if not width or len(text) >= width:
        return text
    return text.ljust(width) if left else text.rjust(width)


def _check_text(text: str) -> None:
    match = _SURROGATE_RE.search(text)
    if match:
        raise TemplateError(
            f"lone surrogate U+{ord(match.group()):04X} cannot be encoded"
        )


def _type_error(spec: ConversionSpec, expected: str, value: Any) -> TemplateError:
    return TemplateError(
        f"%{spec.conversion} expects {expected}, got {type(value).__name__}"
    )


def _format_integer(spec, value, width, precision, left) -> str:
    if not isinstance(value, int):
        raise _type_error(spec, "an int", value)

    conversion = spec.conversion
    bits = LENGTH_BITS[spec.length]
    value &= (1 << bits) - 1

    sign = ""
    if conversion in "di":
        if value >> (bits - 1):
            value -= 1 << bits
        if value < 0:
            sign = "-"
            value = -value
        else:
            sign = spec.sign_char

    if conversion == "o":
        digits = format(value, "o")
    elif conversion in "xX":
        digits = format(value, conversion)
    else:
        digits = str(value)

    if precision is not None:
        digits = "" if precision == 0 and value == 0 else digits.zfill(precision)

    prefix = ""
    if spec.alternate:
        if conversion == "o" and not digits.startswith("0"):
            digits = "0" + digits
        elif conversion in "xX" and value != 0:
            prefix = "0" + conversion

    head = sign + prefix
    # '0' is ignored when a precision is given or when left-justifying
    if width and spec.zero_pad and not left and precision is None:
        digits = digits.zfill(width - len(head))
    return head + digits


def _format_float(spec, value, width, precision, left) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(spec, "a float", value)
    try:
        value = float(value)
    except OverflowError:
        raise TemplateError(f"%{spec.conversion} argument is too large for a double")

    if spec.conversion in "aA":
        return _format_hex_float(spec, value, width, precision, left)

    flags = spec.flags + ("-" if left and not spec.left_justify else "")
    fmt = "%" + flags
    if width:
        fmt += str(width)
    if precision is not None:
        fmt += f".{precision}"
    return (fmt + spec.conversion) % value


def _format_hex_float(spec, value, width, precision, left) -> str:
    sign = "-" if math.copysign(1.0, value) < 0 else spec.sign_char
    value = abs(value)

    if math.isinf(value) or math.isnan(value):
        body = "inf" if math.isinf(value) else "nan"
        text = sign + body
        return text.upper() if spec.conversion == "A" else text

    match = _HEX_FLOAT_RE.fullmatch(value.hex())
    lead = int(match.group(1))
    fraction = match.group(2).ljust(_FRACTION_DIGITS, "0")
    exponent = int(match.group(3))

    if precision is None:
        digits = fraction.rstrip("0")
    elif precision >= _FRACTION_DIGITS:
        digits = fraction.ljust(precision, "0")
    else:
        # round half to even on the last kept hex digit
        shift = 4 * (_FRACTION_DIGITS - precision)
        kept, rest = divmod(int(fraction, 16), 1 << shift)
        half = 1 << (shift - 1)
        odd = (kept & 1) if precision else (lead & 1)
        if rest > half or (rest == half and odd):
            kept += 1
        if kept >> (4 * precision):
            kept -= 1 << (4 * precision)
            lead += 1
        digits = format(kept, "x").zfill(precision) if precision else ""

    point = "." if digits or spec.alternate else ""
    mantissa = f"{lead}{point}{digits}p{exponent:+d}"

    if width and spec.zero_pad and not left:
        mantissa = mantissa.zfill(width - len(sign) - 2)
    text = f"{sign}0x{mantissa}"
    return text.upper() if spec.conversion == "A" else text


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TemplateError(f"%c expects a single character, got {len(value)}")
        text = value
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            text = chr(value)
        except (ValueError, OverflowError):
            raise TemplateError(f"%c code point {value} is out of range")
    else:
        raise TemplateError(f"%c expects an int or str, got {type(value).__name__}")
    _check_text(text)
    return text


def _format_string(value: Any, precision: Optional[int]) -> str:
    if value is None:
        text = "(null)"
    elif isinstance(value, str):
        text = value
    elif isinstance(value, (bytes, bytearray)):
        try:
            text = bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise TemplateError(f"%s argument is not valid UTF-8: {e.reason} at byte {e.start}")
    else:
        raise TemplateError(f"%s expects a str or bytes, got {type(value).__name__}")
    _check_text(text)
    if precision is not None:
        text = text[:precision]
    return text


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        return hex(value & ((1 << 64) - 1))
    return hex(id(value))
