# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DECLARATION,
    ErrorKind,
    MultitextError,
    ParseError,
    ParseResult,
    parse_lines,
)

# Sources
from .sources import SourceConfig, parse_file, parse_stream, parse_text

__all__ = [
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DECLARATION",
    "ErrorKind",
    "MultitextError",
    "ParseError",
    "ParseResult",
    "parse_lines",
    # Sources
    "SourceConfig",
    "parse_file",
    "parse_stream",
    "parse_text",
]
