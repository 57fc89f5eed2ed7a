"""
Data models for parsed commit messages.

The :class:`Commit` is the immutable result of parsing a single
Conventional Commit message. Footer values are collected with a
:class:`FooterBuilder` while parsing and frozen into a read-only mapping
once the commit is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


def _empty_footer() -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Commit:
    """Representation of a parsed commit message.

    Attributes
    ----------
    type : str
        The commit type taken from the header (feat, fix, chore, ...).
    title : str
        The subject text following ``": "`` in the header.
    scope : str
        The parenthesised scope, or an empty string if absent.
    body : str
        Free text between header and footer block, stripped.
    footer : Mapping[str, Tuple[str, ...]]
        Read-only mapping of normalised footer tokens to their values
        in encounter order.
    is_breaking_change : bool
        True if the header carried ``!`` or a ``BREAKING CHANGE``
        footer is present.
    """

    type: str
    title: str
    scope: str = ""
    body: str = ""
    footer: Mapping[str, Tuple[str, ...]] = field(default_factory=_empty_footer, hash=False)
    is_breaking_change: bool = False

    def footer_values(self, token: str) -> Tuple[str, ...]:
        """Return the values stored under ``token`` (empty if absent)."""
        return self.footer.get(token, ())

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable representation of the commit."""
        return {
            "type": self.type,
            "scope": self.scope,
            "title": self.title,
            "body": self.body,
            "footer": {token: list(values) for token, values in self.footer.items()},
            "is_breaking_change": self.is_breaking_change,
        }


class FooterBuilder:
    """Mutable accumulator for footer entries.

    Tokens keep first-seen order and each occurrence appends a new value.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, List[str]] = {}
        self.last_token: Optional[str] = None

    def add(self, token: str, value: str) -> None:
        """Append ``value`` under ``token`` and make it the current token."""
        self._entries.setdefault(token, []).append(value)
        self.last_token = token

    def extend_last(self, line: str) -> bool:
        """Append ``line`` to the most recent value of the current token.

        Returns False when there is no entry to extend.
        """
        if self.last_token is None:
            return False
        values = self._entries.get(self.last_token)
        if not values:
            return False
        values[-1] += "\n" + line
        return True

    def build(self) -> Mapping[str, Tuple[str, ...]]:
        """Freeze the collected entries into a read-only mapping."""
        return MappingProxyType(
            {token: tuple(values) for token, values in self._entries.items()}
        )
