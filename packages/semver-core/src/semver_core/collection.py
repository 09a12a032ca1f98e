# SPDX-License-Identifier: MIT
"""Ordering and filtering of version collections."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Optional, Sequence

from .compare import compare
from .errors import MalformedVersionError
from .semver import Version, parse_version


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one element of an input list.

    Exactly one of ``version`` and ``error`` is set.
    """

    text: str
    version: Optional[Version] = None
    error: Optional[MalformedVersionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_many(texts: Iterable[str], *, loose: bool = True) -> list[ParseOutcome]:
    """Parse every string in ``texts``, keeping failures in place.

    Args:
        texts: Raw version strings in caller order
        loose: Parse with the loose grammar (the default) or strictly

    Returns:
        One ParseOutcome per input, in the same order
    """
    outcomes: list[ParseOutcome] = []
    for text in texts:
        try:
            outcomes.append(ParseOutcome(text=text, version=parse_version(text, loose=loose)))
        except MalformedVersionError as e:
            outcomes.append(ParseOutcome(text=text, error=e))
    return outcomes


def sort_versions(versions: Iterable[Version], *, reverse: bool = False) -> list[Version]:
    """Return the versions ordered by precedence.

    The sort is stable: versions of equal precedence (e.g. differing only in
    metadata) keep their input order in both directions. ``reverse`` negates
    the comparison rather than reversing the output.

    Examples:
        >>> from semver_core import parse_loose
        >>> raw = ["1.2.3", "1.0", "1.3", "2", "0.4.2"]
        >>> [str(v) for v in sort_versions(parse_loose(r) for r in raw)]
        ['0.4.2', '1.0.0', '1.2.3', '1.3.0', '2.0.0']
    """
    if reverse:
        key = cmp_to_key(lambda a, b: -compare(a, b))
    else:
        key = cmp_to_key(compare)
    return sorted(versions, key=key)


def latest(versions: Sequence[Version]) -> Optional[Version]:
    """Return the highest version, or None for an empty collection.

    Among equal versions the first one in input order wins.
    """
    ordered = sort_versions(versions, reverse=True)
    return ordered[0] if ordered else None


def oldest(versions: Sequence[Version]) -> Optional[Version]:
    """Return the lowest version, or None for an empty collection.

    Among equal versions the last one in input order wins, mirroring
    :func:`latest` taken from the other end of a descending sort.
    """
    ordered = sort_versions(versions, reverse=True)
    return ordered[-1] if ordered else None
