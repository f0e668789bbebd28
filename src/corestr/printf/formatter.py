"""Printf-to-string formatting into a growable buffer.

The size of the output is never predicted. Each call guesses a scratch
capacity from the template length, renders, and when the render reports
that it needed more room, grows the scratch buffer to the reported size
and renders again.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from corestr.config import StringsConfig
from corestr.errors import FormatEncodingError

from .buffer import TextBuffer
from .render import ScratchBuffer, render


@dataclass
class FormatOutcome:
    """Final render of a retry loop."""
    text: str
    length: int
    attempts: int
    capacity: int


def render_with_retry(
    template: str,
    args: Sequence[Any] = (),
    guess_factor: Optional[int] = None,
) -> FormatOutcome:
    """Render `template` with `args`, growing the scratch buffer until it fits.

    Raises FormatEncodingError when the render reports a negative size.
    """
    if guess_factor is None:
        guess_factor = StringsConfig().guess_factor

    capacity = len(template) * guess_factor
    attempts = 0

    while True:
        attempts += 1
        with ScratchBuffer(capacity) as scratch:
            result = render(scratch, template, args)

        if result.required < 0:
            raise FormatEncodingError(template, result.error)

        if result.required > capacity:
            capacity = max(capacity + 1, result.required)
            continue

        return FormatOutcome(
            text=result.text,
            length=result.required,
            attempts=attempts,
            capacity=capacity,
        )


def format_into(
    buffer: TextBuffer,
    template: str,
    args: Sequence[Any] = (),
    config: Optional[StringsConfig] = None,
) -> int:
    """Replace the content of `buffer` with the formatted template.

    Returns the number of characters written.
    """
    config = config or StringsConfig()
    buffer.clear()
    outcome = render_with_retry(template, args, config.guess_factor)
    buffer.append(outcome.text)
    return outcome.length


def append_into(
    buffer: TextBuffer,
    template: str,
    args: Sequence[Any] = (),
    config: Optional[StringsConfig] = None,
) -> int:
    """Append the formatted template to `buffer`.

    Returns the length of the appended text, not of the whole buffer.
    On error the buffer is left unchanged.
    """
    appended = TextBuffer()
    length = format_into(appended, template, args, config)
    buffer.append(appended.value)
    return length


def string_printf(buffer: TextBuffer, template: str, *args: Any) -> int:
    return format_into(buffer, template, args)


def append_printf(buffer: TextBuffer, template: str, *args: Any) -> int:
    return append_into(buffer, template, args)


def sprintf(template: str, *args: Any) -> str:
    """Format into a fresh buffer and return its text."""
    buffer = TextBuffer()
    format_into(buffer, template, args)
    return buffer.value
