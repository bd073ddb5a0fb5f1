# parsers/line_parser.py

import logging
from collections.abc import Iterable
from enum import Enum
from time import monotonic

from multitext.observability import names
from multitext.observability.base import MetricsHook, NoOpMetricsHook

from .models import ErrorKind, ParseError, ParseResult

logger = logging.getLogger(__name__)

DECLARATION = "multitext header"
MISSING_HEADER_MESSAGE = "missing multitext header"


class Phase(Enum):
    DISCOVERING = "discovering"
    ACCUMULATING = "accumulating"
    FINISHED = "finished"


class ParserState:
    """
    Two-phase multitext state machine.

    DISCOVERING scans for the declaration line and derives the marker from
    the text before it. ACCUMULATING splits every later line into sections.
    finish() moves to FINISHED, after which the state accepts no more calls.
    The phase only moves forward.
    """

    def __init__(self) -> None:
        self.phase = Phase.DISCOVERING
        self.line_number = 0
        self.marker: str | None = None
        self.sections: dict[str, str] = {}
        self._name = DECLARATION
        self._body: list[str] = []

    def feed(self, line: str) -> None:
        if self.phase is Phase.FINISHED:
            raise RuntimeError("parser state is finished")
        self.line_number += 1

        marker = self.marker
        if marker is None:
            self._discover(line)
        elif line.startswith(marker):
            self._close_section()
            self._name = line[len(marker) :].strip()
        else:
            self._body.append(line)
            self._body.append("\n")

    def finish(self) -> ParseResult:
        if self.phase is Phase.FINISHED:
            raise RuntimeError("parser state is finished")
        discovering = self.phase is Phase.DISCOVERING
        self.phase = Phase.FINISHED

        if discovering:
            return ParseResult.failure(
                ParseError(
                    kind=ErrorKind.MISSING_HEADER,
                    message=MISSING_HEADER_MESSAGE,
                    line_number=self.line_number,
                )
            )

        self._close_section()
        return ParseResult.success(dict(self.sections))

    def _discover(self, line: str) -> None:
        index = line.find(DECLARATION)
        if index == -1:
            return
        self.marker = line[:index].rstrip()
        self.phase = Phase.ACCUMULATING
        logger.debug(
            "Found multitext header on line %d, marker=%r",
            self.line_number,
            self.marker,
        )

    def _close_section(self) -> None:
        # a repeated name overwrites the earlier body
        self.sections[self._name] = "".join(self._body)
        self._body = []


def parse_lines(
    lines: Iterable[str],
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParseResult:
    """Parse newline-stripped lines into a mapping of section name to body.

    Args:
        lines: Lines without terminators. Consumed fully, in order.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        A successful ParseResult with the sections, or a failed one with a
        missing-header ParseError carrying the last line number reached.

    Example:
        >>> result = parse_lines(["## multitext header", "## a", "text"])
        >>> result.sections
        {'multitext header': '', 'a': 'text\\n'}
    """
    start = monotonic()
    state = ParserState()
    for line in lines:
        state.feed(line)
    result = state.finish()

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
    metrics_hook.increment(names.PARSE_LINES_TOTAL, state.line_number)
    if result.sections is not None:
        metrics_hook.increment(names.PARSE_SECTIONS_CREATED, len(result.sections))
        logger.debug(
            "Parsed %d sections from %d lines",
            len(result.sections),
            state.line_number,
        )
    else:
        metrics_hook.increment(
            names.PARSE_ERRORS_TOTAL, labels={"kind": ErrorKind.MISSING_HEADER.value}
        )
    return result
