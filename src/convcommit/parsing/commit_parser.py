"""
Parser for Conventional Commit messages.

:func:`parse` turns one raw commit message into a :class:`Commit`. The
message is processed in three passes: the header is split off and
matched, the remaining lines are divided into body and footer block,
and the footer block is walked line by line to collect footer entries,
including values that span several lines.

Parsing fails with :class:`EmptyMessageError` for blank input and with
:class:`MalformedHeaderError` when the first line is not of the form
``type(scope)!: subject``. Irregular footer lines never fail.
"""

from __future__ import annotations

import enum
import logging
import re

from convcommit.parsing.commit_model import Commit
from convcommit.parsing.footer_parser import (
    BREAKING_CHANGE_TOKEN,
    parse_footer_lines,
    split_body_and_footer,
)


logger = logging.getLogger(__name__)
# Null handler only; messages propagate once the CLI configures logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


HEADER_PATTERN = re.compile(
    r"(?P<type>\w+)(?:\((?P<scope>[\w-]+)\))?(?P<breaking>!)?: (?P<subject>.+)",
    re.ASCII,
)


class ParseErrorKind(str, enum.Enum):
    """The reason a commit message could not be parsed."""

    EMPTY_MESSAGE = "empty_message"
    MALFORMED_HEADER = "malformed_header"


class ParseError(Exception):
    """Raised when a commit message cannot be parsed."""

    kind: ParseErrorKind


class EmptyMessageError(ParseError):
    """Raised when the message is empty or contains only whitespace."""

    kind = ParseErrorKind.EMPTY_MESSAGE

    def __init__(self) -> None:
        super().__init__("empty or whitespace-only commit message")


class MalformedHeaderError(ParseError):
    """Raised when the first line does not match ``type(scope)!: subject``."""

    kind = ParseErrorKind.MALFORMED_HEADER

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(
            f"could not parse commit header {header!r}: "
            "expected 'type(scope)!: subject'"
        )


def parse(message: str) -> Commit:
    """Parse a single commit message.

    Parameters
    ----------
    message : str
        The full raw commit message, lines separated by ``\\n``.

    Returns
    -------
    Commit
        The parsed commit.

    Raises
    ------
    EmptyMessageError
        If ``message`` is empty or whitespace only.
    MalformedHeaderError
        If the first line is not a valid Conventional Commit header.
    """
    # str.strip also removes \x1c-\x1f, unlike a Unicode-space-only trim.
    text = message.strip()
    if not text:
        raise EmptyMessageError()

    header, _, rest = text.partition("\n")
    match = HEADER_PATTERN.fullmatch(header)
    if match is None:
        raise MalformedHeaderError(header)

    body_lines, footer_lines = split_body_and_footer(rest.split("\n"))
    footer = parse_footer_lines(footer_lines)

    header_breaking = match.group("breaking") is not None
    is_breaking_change = header_breaking or bool(footer.get(BREAKING_CHANGE_TOKEN))

    commit = Commit(
        type=match.group("type"),
        title=match.group("subject"),
        scope=match.group("scope") or "",
        body="\n".join(body_lines).strip(),
        footer=footer,
        is_breaking_change=is_breaking_change,
    )
    logger.debug(
        "Parsed %s commit (scope=%r, breaking=%s, footer tokens=%s)",
        commit.type,
        commit.scope,
        commit.is_breaking_change,
        list(footer),
    )
    return commit
