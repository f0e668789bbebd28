"""Printf template parsing."""

import re
from dataclasses import dataclass
from typing import Optional, Union


STAR = "*"

INTEGER_CONVERSIONS = set("diouxX")
FLOAT_CONVERSIONS = set("eEfFgGaA")

_SPEC_RE = re.compile(
    r"%"
    r"(?P<flags>[-+ #0]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>hh|h|ll|l|j|z|t|L)?"
    r"(?P<conversion>[diouxXeEfFgGaAcsp%])"
)


class TemplateError(ValueError):
    """A template contains an invalid or incomplete conversion."""


@dataclass(frozen=True)
class Literal:
    """Plain text copied to the output."""
    text: str


@dataclass(frozen=True)
class ConversionSpec:
    """One %-conversion of a template."""
    conversion: str
    flags: str = ""
    width: Union[int, str, None] = None
    precision: Union[int, str, None] = None
    length: Optional[str] = None

    @property
    def left_justify(self) -> bool:
        return "-" in self.flags

    @property
    def zero_pad(self) -> bool:
        return "0" in self.flags

    @property
    def alternate(self) -> bool:
        return "#" in self.flags

    @property
    def sign_char(self) -> str:
        """Character printed before non-negative signed values."""
        if "+" in self.flags:
            return "+"
        if " " in self.flags:
            return " "
        return ""

    @property
    def arg_count(self) -> int:
        """Number of arguments consumed, including '*' width/precision."""
        return 1 + (self.width == STAR) + (self.precision == STAR)


Piece = Union[Literal, ConversionSpec]


def parse_template(template: str) -> list[Piece]:
    """Split a template into literal text and conversion specifiers.

    Adjacent literal text (including '%%') is merged into one Literal.
    Raises TemplateError on a '%' that does not start a valid conversion.
    """
    pieces: list[Piece] = []
    text: list[str] = []
    pos = 0

    while True:
        percent = template.find("%", pos)
        if percent < 0:
            text.append(template[pos:])
            break

        text.append(template[pos:percent])
        match = _SPEC_RE.match(template, percent)
        if match is None:
            raise TemplateError(
                f"invalid conversion {template[percent:percent + 4]!r} at offset {percent}"
            )
        pos = match.end()

        if match.group("conversion") == "%":
            text.append("%")
            continue

        _flush(pieces, text)
        pieces.append(_build_spec(match))

    _flush(pieces, text)
    return pieces


def _flush(pieces: list[Piece], text: list[str]) -> None:
    joined = "".join(text)
    text.clear()
    if joined:
        pieces.append(Literal(joined))


def _build_spec(match: re.Match) -> ConversionSpec:
    width = match.group("width")
    precision = match.group("precision")

    if width is not None and width != STAR:
        width = int(width)
    if precision is not None and precision != STAR:
        # "%.f" means precision 0
        precision = int(precision) if precision else 0

    return ConversionSpec(
        conversion=match.group("conversion"),
        flags=match.group("flags"),
        width=width,
        precision=precision,
        length=match.group("length"),
    )
