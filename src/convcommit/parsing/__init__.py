"""
Conventional Commit message parsing.

See :mod:`convcommit.parsing.commit_parser` for the parser and
:mod:`convcommit.parsing.commit_model` for the :class:`Commit` record.
"""

from .commit_model import Commit, FooterBuilder  # noqa: F401
from .commit_parser import (  # noqa: F401
    EmptyMessageError,
    MalformedHeaderError,
    ParseError,
    ParseErrorKind,
    parse,
)
