"""String helpers package."""

from .split import split_string
from .convert import WideString, s2ws, ws2s
from .hexdump import float2hex, double2hex, hex2float, hex2double

__all__ = [
    "split_string",
    "WideString",
    "s2ws",
    "ws2s",
    "float2hex",
    "double2hex",
    "hex2float",
    "hex2double",
]
