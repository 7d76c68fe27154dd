from .bits import reflect
from .decoder import InputMode, decode, decode_hex, decode_text

__all__ = ["reflect",
           "InputMode",
           "decode",
           "decode_hex",
           "decode_text"]
