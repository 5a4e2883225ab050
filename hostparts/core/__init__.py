"""Core module for hostparts."""

from .config import ConfigManager, ConfigError
from .logging_config import setup_logging
from .models import Rule, RuleStore, SuffixList, DomainParts
from .errors import (
    ParseError,
    InvalidUriError,
    NoHostError,
    UnknownSuffixError,
    InvalidDomainError,
)
from .psl_loader import add_rule, load_rules, load_suffix_list
from .suffix_matcher import find_suffix, is_public_suffix
from .decomposer import extract_parts
from .parser import decode_host, parse, parse_host

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    # Logging
    "setup_logging",
    # Models
    "Rule",
    "RuleStore",
    "SuffixList",
    "DomainParts",
    # Errors
    "ParseError",
    "InvalidUriError",
    "NoHostError",
    "UnknownSuffixError",
    "InvalidDomainError",
    # Loading
    "add_rule",
    "load_rules",
    "load_suffix_list",
    # Matching and parsing
    "find_suffix",
    "is_public_suffix",
    "extract_parts",
    "decode_host",
    "parse",
    "parse_host",
]
