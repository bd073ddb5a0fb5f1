# parsers/models.py

from dataclasses import dataclass, replace
from enum import Enum
from typing import cast


class ErrorKind(str, Enum):
    MISSING_HEADER = "missing_header"
    IO = "io"


@dataclass(frozen=True)
class ParseError:
    """
    A parse or source failure.

    - line_number is 1-based, None when the failure is not tied to a line
    - source is attached by the caller after the fact, never by the parser
    """

    kind: ErrorKind
    message: str
    line_number: int | None = None
    source: str | None = None

    def with_source(self, source: str | None) -> "ParseError":
        return replace(self, source=source)

    def __str__(self) -> str:
        text = f"multitext ParseError : {self.message} : "
        if self.source is not None:
            text += self.source
        if self.line_number is not None:
            text += f"({self.line_number})"
        return text


class MultitextError(Exception):
    """Raised by ParseResult.unwrap() for a failed result."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class ParseResult:
    """Either the parsed sections or the error, never both."""

    sections: dict[str, str] | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.sections is None) == (self.error is None):
            raise ValueError("exactly one of sections or error must be set")

    @classmethod
    def success(cls, sections: dict[str, str]) -> "ParseResult":
        return cls(sections=sections)

    @classmethod
    def failure(cls, error: ParseError) -> "ParseResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def with_source(self, source: str | None) -> "ParseResult":
        if self.error is None:
            return self
        return ParseResult.failure(self.error.with_source(source))

    def unwrap(self) -> dict[str, str]:
        if self.sections is not None:
            return self.sections
        # __post_init__ guarantees error is set when sections is not
        raise MultitextError(cast(ParseError, self.error))
