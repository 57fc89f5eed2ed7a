"""
Top-level package for convcommit.

Exposes :func:`parse` and the :class:`Commit` record. The command line
interface lives in :mod:`convcommit.cli`.
"""

from convcommit.parsing import (
    Commit,
    EmptyMessageError,
    MalformedHeaderError,
    ParseError,
    ParseErrorKind,
    parse,
)

__all__ = [
    "__version__",
    "Commit",
    "EmptyMessageError",
    "MalformedHeaderError",
    "ParseError",
    "ParseErrorKind",
    "parse",
]

__version__ = "0.1.0"
