from .line_parser import DECLARATION, ParserState, Phase, parse_lines
from .models import ErrorKind, MultitextError, ParseError, ParseResult

__all__ = [
    "DECLARATION",
    "ErrorKind",
    "MultitextError",
    "ParseError",
    "ParseResult",
    "ParserState",
    "Phase",
    "parse_lines",
]
