"""Public Suffix List loader for hostparts.

Turns suffix-list text into an immutable RuleStore. Three rule kinds are
recognised:
- Normal rules (e.g., com, co.uk)
- Wildcard rules (e.g., *.ck means any single label + ck is a public suffix)
- Exception rules (e.g., !www.ck means www.ck is NOT a public suffix)

No syntax validation is done beyond these prefix checks; any other line is
stored verbatim as a normal rule.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from .constants import (
    COMMENT_PREFIX,
    DEFAULT_SUFFIX_LIST_PATH,
    EXCEPTION_PREFIX,
    PRIVATE_SECTION_MARKER,
    WILDCARD_PREFIX,
)
from .models import Rule, RuleStore, SuffixList

logger = logging.getLogger(__name__)


class RuleKind(Enum):
    """Kind of a suffix-list rule."""

    NORMAL = "normal"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


def classify_rule(rule: str) -> tuple[RuleKind, str]:
    """
    Classify a raw rule string.

    Args:
        rule: Rule as written in the list (e.g., "*.ck", "!www.ck", "co.uk")

    Returns:
        Tuple of (kind, pattern) where pattern has the marker stripped
    """
    if rule.startswith(EXCEPTION_PREFIX):
        return RuleKind.EXCEPTION, rule[len(EXCEPTION_PREFIX):]
    if rule.startswith(WILDCARD_PREFIX):
        return RuleKind.WILDCARD, rule[len(WILDCARD_PREFIX):]
    return RuleKind.NORMAL, rule


def _insert_rule(
    exact: dict[str, Rule],
    wildcards: set[str],
    exceptions: dict[str, Rule],
    rule: str,
    is_public: bool,
) -> None:
    """Insert one rule into mutable collections being accumulated."""
    kind, pattern = classify_rule(rule)

    if kind is RuleKind.EXCEPTION:
        exceptions[pattern] = Rule(pattern, is_public)
    elif kind is RuleKind.WILDCARD:
        # The bare parent is a public suffix as well
        exact[pattern] = Rule(pattern, is_public)
        wildcards.add(pattern)
    else:
        exact[pattern] = Rule(pattern, is_public)


def add_rule_to_store(store: RuleStore, rule: str, is_public: bool) -> RuleStore:
    """Return a new RuleStore with ``rule`` added; ``store`` is left untouched."""
    exact = dict(store.exact)
    wildcards = set(store.wildcards)
    exceptions = dict(store.exceptions)
    _insert_rule(exact, wildcards, exceptions, rule, is_public)
    return RuleStore.build(exact, wildcards, exceptions)


def add_rule(suffix_list: SuffixList, rule: str, is_public: bool = True) -> SuffixList:
    """
    Add a rule to a suffix list.

    Args:
        suffix_list: List to extend
        rule: Rule string, classified the same way as lines of a list file
        is_public: Whether the rule belongs to the public (ICANN) section

    Returns:
        A new SuffixList; the original is unchanged
    """
    logger.debug("Adding rule %r (public=%s)", rule, is_public)
    return SuffixList(add_rule_to_store(suffix_list.store, rule, is_public))


def load_rules(text: str, include_private: bool = False) -> RuleStore:
    """
    Parse suffix-list text into a RuleStore.

    Args:
        text: Full contents of a suffix list
        include_private: Keep rules after the private-domains marker

    Returns:
        RuleStore holding every rule read
    """
    exact: dict[str, Rule] = {}
    wildcards: set[str] = set()
    exceptions: dict[str, Rule] = {}
    is_public = True

    for line in text.splitlines():
        line = line.strip()

        if not line:
            continue

        # The marker normally sits inside a comment line, so test it first
        if is_public and PRIVATE_SECTION_MARKER in line:
            if not include_private:
                break
            is_public = False
            continue

        if line.startswith(COMMENT_PREFIX):
            continue

        _insert_rule(exact, wildcards, exceptions, line, is_public)

    logger.info(
        "Loaded suffix rules: %d exact, %d wildcards, %d exceptions (private=%s)",
        len(exact),
        len(wildcards),
        len(exceptions),
        include_private,
    )
    return RuleStore.build(exact, wildcards, exceptions)


def load_suffix_list(include_private: bool = False, path: str | Path | None = None) -> SuffixList:
    """
    Load a suffix list from disk.

    Args:
        include_private: Keep rules from the private-domains section
        path: List file to read; the bundled list when omitted

    Returns:
        SuffixList ready for parse()

    Raises:
        OSError: If the file cannot be read. This is not recoverable here.
    """
    psl_path = Path(path) if path is not None else DEFAULT_SUFFIX_LIST_PATH

    try:
        text = psl_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Failed to read suffix list %s: %s", psl_path, e)
        raise

    logger.debug("Read suffix list from %s", psl_path)
    return SuffixList(load_rules(text, include_private))
