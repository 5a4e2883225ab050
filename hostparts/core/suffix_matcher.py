"""Longest-match public suffix resolution."""

from __future__ import annotations

import logging

from .constants import LABEL_SEPARATOR
from .errors import UnknownSuffixError
from .models import RuleStore

logger = logging.getLogger(__name__)


def _matches(candidate: str, store: RuleStore) -> bool:
    """Check whether a single candidate suffix is covered by the store."""
    # Exceptions name strings that are NOT public suffixes
    if candidate in store.exceptions:
        return False

    if candidate in store.exact:
        return True

    # "foo.ck" is covered by "*.ck" (stored as "ck" in wildcards)
    _, sep, parent = candidate.partition(LABEL_SEPARATOR)
    return bool(sep) and parent in store.wildcards


def find_suffix(host: str, store: RuleStore) -> str:
    """
    Find the longest public suffix of a host.

    Candidates are built from the rightmost label outwards, so for
    "www.example.co.uk" the store is asked about "uk", "co.uk",
    "example.co.uk" and "www.example.co.uk" in that order.

    Args:
        host: Host name, already IDNA-decoded where needed
        store: Rules to match against

    Returns:
        The longest matching suffix (e.g., "co.uk")

    Raises:
        UnknownSuffixError: If no candidate matches any rule
    """
    labels = host.split(LABEL_SEPARATOR)
    labels.reverse()

    best: str | None = None
    for i in range(1, len(labels) + 1):
        candidate = LABEL_SEPARATOR.join(reversed(labels[:i]))
        if not _matches(candidate, store):
            continue
        # Equal lengths keep the later, longer-label-count candidate
        if best is None or len(candidate) >= len(best):
            best = candidate

    if best is None:
        raise UnknownSuffixError(host)

    logger.debug("Suffix for %s is %s", host, best)
    return best


def is_public_suffix(domain: str, store: RuleStore) -> bool:
    """
    Check if a domain is itself a public suffix.

    Args:
        domain: Domain to check (e.g., "co.uk", "com")
        store: Rules to match against

    Returns:
        True if the longest suffix of the domain is the whole domain
    """
    try:
        return find_suffix(domain, store) == domain
    except UnknownSuffixError:
        return False
