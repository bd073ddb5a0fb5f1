from .config import SourceConfig
from .loader import parse_file, parse_stream, parse_text

__all__ = [
    "SourceConfig",
    "parse_file",
    "parse_stream",
    "parse_text",
]
