"""hostparts: split hosts into public suffix, registrable domain and subdomains."""

from .core import (
    DomainParts,
    InvalidDomainError,
    InvalidUriError,
    NoHostError,
    ParseError,
    Rule,
    RuleStore,
    SuffixList,
    UnknownSuffixError,
    add_rule,
    extract_parts,
    find_suffix,
    is_public_suffix,
    load_rules,
    load_suffix_list,
    parse,
    parse_host,
)
from .core.constants import APP_VERSION as __version__

__all__ = [
    "DomainParts",
    "InvalidDomainError",
    "InvalidUriError",
    "NoHostError",
    "ParseError",
    "Rule",
    "RuleStore",
    "SuffixList",
    "UnknownSuffixError",
    "add_rule",
    "extract_parts",
    "find_suffix",
    "is_public_suffix",
    "load_rules",
    "load_suffix_list",
    "parse",
    "parse_host",
]
