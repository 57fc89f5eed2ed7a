"""
Footer block detection and footer line parsing.

A footer block starts at the first line after the header that looks
like ``token: value`` or ``token #value``. Every line from there on
belongs to the footer block. Lines inside the block that do not match
the footer pattern continue the value of the previous footer entry.
"""

from __future__ import annotations

import logging
import re
from typing import List, Mapping, Optional, Sequence, Tuple

from convcommit.parsing.commit_model import FooterBuilder


logger = logging.getLogger(__name__)
# Null handler only; messages propagate once the CLI configures logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


BREAKING_CHANGE_TOKEN = "BREAKING CHANGE"
CLOSES_TOKEN = "Closes"

# Lower-cased aliases mapped to their canonical token.
TOKEN_ALIASES = {
    "breaking-change": BREAKING_CHANGE_TOKEN,
    "fix": CLOSES_TOKEN,
    "fixes": CLOSES_TOKEN,
    "close": CLOSES_TOKEN,
    "closes": CLOSES_TOKEN,
}

FOOTER_OPEN_PATTERN = re.compile(
    r"(?:BREAKING-CHANGE|BREAKING CHANGE|[\w-]+)(?:: | #)",
    re.ASCII,
)

FOOTER_LINE_PATTERN = re.compile(
    r"(?P<token>[\w-]+|BREAKING CHANGE|BREAKING-CHANGE)(?P<separator>: | #)(?P<value>.*)",
    re.ASCII,
)


def normalize_token(token: str) -> str:
    """Return the canonical name of a footer token.

    ``BREAKING-CHANGE`` becomes ``BREAKING CHANGE`` and ``fix``,
    ``fixes``, ``close`` and ``closes`` become ``Closes``, all compared
    case-insensitively. Other tokens keep their original casing.
    """
    return TOKEN_ALIASES.get(token.lower(), token)


def find_footer_start(lines: Sequence[str]) -> Optional[int]:
    """Return the index of the first line opening the footer block, or None."""
    for index, line in enumerate(lines):
        if FOOTER_OPEN_PATTERN.match(line):
            return index
    return None


def split_body_and_footer(lines: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split lines after the header into body lines and footer lines."""
    start = find_footer_start(lines)
    if start is None:
        return list(lines), []
    logger.debug("Footer block starts at line %d of %d", start, len(lines))
    return list(lines[:start]), list(lines[start:])


def parse_footer_lines(lines: Sequence[str]) -> Mapping[str, Tuple[str, ...]]:
    """Parse footer block lines into a read-only token to values mapping.

    Repeated tokens accumulate values in encounter order. A line that is
    not a footer line is appended, preceded by a newline, to the last
    value of the previous token. Such a line is dropped when no token
    has been seen yet.
    """
    builder = FooterBuilder()
    for line in lines:
        match = FOOTER_LINE_PATTERN.fullmatch(line)
        if match:
            token = normalize_token(match.group("token"))
            if token != match.group("token"):
                logger.debug("Normalised footer token %r to %r", match.group("token"), token)
            builder.add(token, match.group("value"))
        elif not builder.extend_last(line):
            logger.debug("Dropping footer line with no preceding token: %r", line)
    return builder.build()
