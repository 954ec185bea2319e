"""Header codec: decode and encode canonical WAV headers."""

from .decoder import decode
from .encoder import build_header, encode

__all__ = [
    "build_header",
    "decode",
    "encode",
]
