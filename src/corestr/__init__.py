"""corestr: printf-to-string formatting and small string helpers."""

__version__ = "0.1.0"

from corestr.errors import CoreStringsError, FormatEncodingError, ConversionError
from corestr.config import StringsConfig, load_config
from corestr.printf import (
    TextBuffer,
    format_into,
    append_into,
    string_printf,
    append_printf,
    sprintf,
)
from corestr.strings import (
    split_string,
    s2ws,
    ws2s,
    float2hex,
    double2hex,
    hex2float,
    hex2double,
)

__all__ = [
    "CoreStringsError",
    "FormatEncodingError",
    "ConversionError",
    "StringsConfig",
    "load_config",
    "TextBuffer",
    "format_into",
    "append_into",
    "string_printf",
    "append_printf",
    "sprintf",
    "split_string",
    "s2ws",
    "ws2s",
    "float2hex",
    "double2hex",
    "hex2float",
    "hex2double",
]
