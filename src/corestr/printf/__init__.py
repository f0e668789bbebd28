"""Printf-to-string formatting package."""

from .buffer import TextBuffer
from .formatter import (
    FormatOutcome,
    render_with_retry,
    format_into,
    append_into,
    string_printf,
    append_printf,
    sprintf,
)
from .render import ScratchBuffer, RenderResult, render
from .template import ConversionSpec, Literal, TemplateError, parse_template

__all__ = [
    "TextBuffer",
    "FormatOutcome",
    "render_with_retry",
    "format_into",
    "append_into",
    "string_printf",
    "append_printf",
    "sprintf",
    "ScratchBuffer",
    "RenderResult",
    "render",
    "ConversionSpec",
    "Literal",
    "TemplateError",
    "parse_template",
]
