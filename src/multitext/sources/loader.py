# src/multitext/sources/loader.py

import logging
from collections.abc import Iterator
from os import PathLike
from typing import IO

from multitext.observability import names
from multitext.observability.base import MetricsHook, NoOpMetricsHook
from multitext.parsers.line_parser import parse_lines
from multitext.parsers.models import ErrorKind, ParseError, ParseResult

from .config import SourceConfig

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _split_text(text: str) -> Iterator[str]:
    # a final terminator does not start another (empty) line
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield _strip_terminator(text[start : end + 1])
        start = end + 1


class _LineReader:
    """
    Iterates a text or binary stream as terminator-stripped lines.

    Binary lines are decoded one at a time, so the encoding must keep
    b"\\n" as the line separator (utf-8, latin-1, cp1252 and the like).
    Text streams decode themselves; their errors are not tied to a line.
    """

    def __init__(
        self,
        stream: IO[str] | IO[bytes],
        config: SourceConfig,
        metrics_hook: MetricsHook,
    ) -> None:
        self._stream = stream
        self._config = config
        self._metrics_hook = metrics_hook
        self.line_number = 0
        # set only when a binary line fails to decode
        self.failed_line_number: int | None = None

    def __iter__(self) -> Iterator[str]:
        for raw in self._stream:
            self.line_number += 1
            if isinstance(raw, bytes):
                try:
                    line = raw.decode(self._config.encoding)
                except UnicodeDecodeError:
                    if not self._config.skip_undecodable_lines:
                        self.failed_line_number = self.line_number
                        raise
                    logger.debug(
                        "Skipping undecodable line %d (%s)",
                        self.line_number,
                        self._config.encoding,
                    )
                    self._metrics_hook.increment(names.SOURCE_LINES_SKIPPED)
                    continue
            else:
                line = raw
            yield _strip_terminator(line)


def _source_failure(
    message: str,
    *,
    source: str | None,
    line_number: int | None,
    metrics_hook: MetricsHook,
) -> ParseResult:
    metrics_hook.increment(
        names.SOURCE_ERRORS_TOTAL, labels={"kind": ErrorKind.IO.value}
    )
    error = ParseError(kind=ErrorKind.IO, message=message, line_number=line_number)
    return ParseResult.failure(error).with_source(source)


def parse_text(
    text: str,
    *,
    source: str | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParseResult:
    """Parse an in-memory multitext document.

    Lines are split on "\\n"; a "\\r" directly before it is dropped too.
    """
    result = parse_lines(_split_text(text), metrics_hook=metrics_hook)
    return result.with_source(source)


def parse_stream(
    stream: IO[str] | IO[bytes],
    *,
    source: str | None = None,
    config: SourceConfig = SourceConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParseResult:
    """Parse an open text or binary stream. The stream is not closed.

    Args:
        stream: Text stream, or binary stream decoded with config.encoding.
        source: Identifier attached to any error, e.g. a filename.
        config: Decoding options for binary streams. Text streams ignore
            it; they decode with their own encoding and errors setting.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The parser's result with source attached on failure. Read failures
        and decode failures become ErrorKind.IO errors. A binary line that
        fails to decode reports its line number unless it is skipped; a text
        stream decode failure has no line number, since the stream decodes
        ahead of the line being read.
    """
    reader = _LineReader(stream, config, metrics_hook)
    try:
        result = parse_lines(reader, metrics_hook=metrics_hook)
    except UnicodeDecodeError as exc:
        logger.error("Cannot decode %s: %s", source or "<stream>", exc)
        if reader.failed_line_number is None:
            message = f"cannot decode source: {exc}"
        else:
            message = f"cannot decode line as {config.encoding}"
        return _source_failure(
            message,
            source=source,
            line_number=reader.failed_line_number,
            metrics_hook=metrics_hook,
        )
    except OSError as exc:
        logger.error("Cannot read %s: %s", source or "<stream>", exc)
        return _source_failure(
            f"cannot read source: {exc.strerror or exc}",
            source=source,
            line_number=None,
            metrics_hook=metrics_hook,
        )
    return result.with_source(source)


def parse_file(
    path: str | PathLike[str],
    *,
    config: SourceConfig = SourceConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParseResult:
    """Open a multitext file and parse it, attaching the path to any error."""
    source = str(path)
    logger.debug("Opening multitext file: %s", source)
    try:
        with open(path, "rb") as f:
            return parse_stream(
                f, source=source, config=config, metrics_hook=metrics_hook
            )
    except OSError as exc:
        logger.error("Cannot open %s: %s", source, exc)
        return _source_failure(
            f"cannot open source: {exc.strerror or exc}",
            source=source,
            line_number=None,
            metrics_hook=metrics_hook,
        )
