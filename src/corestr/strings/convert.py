"""Narrow (UTF-8) <-> wide (UTF-16 / UTF-32 code units) conversion."""

import sys
from array import array
from typing import Optional, Sequence, Union

from corestr.config import StringsConfig
from corestr.errors import ConversionError


WideString = array

_TYPECODES = {
    2: "H",
    4: "I" if array("I").itemsize == 4 else "L",
}
_ENDIAN = "le" if sys.byteorder == "little" else "be"


def _codec(width: int) -> str:
    return f"utf-{width * 8}-{_ENDIAN}"


def _resolve_width(width: Optional[int]) -> int:
    if width is None:
        return StringsConfig().wchar_width
    if width not in _TYPECODES:
        raise ValueError(f"wide character width must be 2 or 4, got {width!r}")
    return width


def s2ws(text: Union[bytes, bytearray, str], width: Optional[int] = None) -> WideString:
    """Convert UTF-8 text to an array of wide code units.

    `width` is the size of a code unit in bytes: 2 gives UTF-16 (with
    surrogate pairs), 4 gives UTF-32. Defaults to the platform wchar_t.
    Raises ConversionError on malformed UTF-8 or lone surrogates.
    """
    width = _resolve_width(width)

    if isinstance(text, (bytes, bytearray)):
        try:
            decoded = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConversionError(f"invalid UTF-8: {e.reason}", e.start)
    else:
        decoded = text

    try:
        data = decoded.encode(_codec(width))
    except UnicodeEncodeError as e:
        raise ConversionError(f"cannot encode text: {e.reason}", e.start)

    wide = array(_TYPECODES[width])
    wide.frombytes(data)
    return wide


def ws2s(wide: Union[WideString, Sequence[int], str], width: Optional[int] = None) -> bytes:
    """Convert wide code units back to UTF-8 bytes.

    An array carries its own width; plain sequences of ints use `width`
    (platform default when omitted). Raises ConversionError on lone
    surrogates or code units outside the Unicode range.
    """
    if isinstance(wide, str):
        units = s2ws(wide, width)
        width = units.itemsize
    elif isinstance(wide, array) and wide.itemsize in _TYPECODES:
        units = wide
        width = wide.itemsize
    else:
        width = _resolve_width(width)
        units = array(_TYPECODES[width])
        limit = 1 << (8 * width)
        for index, unit in enumerate(wide):
            if not isinstance(unit, int) or not 0 <= unit < limit:
                raise ConversionError(f"invalid {width * 8}-bit code unit {unit!r}", index)
            units.append(unit)

    try:
        decoded = units.tobytes().decode(_codec(width))
    except UnicodeDecodeError as e:
        raise ConversionError(f"invalid wide string: {e.reason}", e.start // width)

    return decoded.encode("utf-8")
