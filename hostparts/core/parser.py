"""Parse URIs into structured domain parts.

Pipeline: URI -> host -> (IDNA decode) -> public suffix -> DomainParts.
Each step raises its ParseError subclass and stops the pipeline.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import idna

from .constants import IDNA_ACE_PREFIX
from .decomposer import extract_parts
from .errors import InvalidDomainError, InvalidUriError, NoHostError
from .models import DomainParts, SuffixList
from .suffix_matcher import find_suffix

logger = logging.getLogger(__name__)


def decode_host(host: str) -> str:
    """
    Decode ASCII-compatible labels of a host to Unicode.

    Decoding is triggered by "xn--" appearing anywhere in the host, not
    only at the start of a label, so "axn--b.com" is decoded too.

    The codec checks every label against IDNA 2008, ASCII labels included.
    One disallowed label fails the whole host, so "my_site.xn--p1ai" is
    rejected for its underscore even though its suffix is listed.

    Raises:
        InvalidDomainError: If the IDNA codec rejects the host
    """
    if IDNA_ACE_PREFIX not in host:
        return host

    try:
        decoded = idna.decode(host)
    except idna.IDNAError as e:
        raise InvalidDomainError(host, reason=f"IDNA decoding failed: {e}") from e

    logger.debug("Decoded %s to %s", host, decoded)
    return decoded


def _extract_host(uri: str) -> str:
    """Return the host component of a URI."""
    if any(ch.isspace() for ch in uri.strip()):
        raise InvalidUriError(uri, "contains whitespace")

    try:
        host = urlsplit(uri.strip()).hostname
    except ValueError as e:
        raise InvalidUriError(uri, str(e)) from e

    if not host:
        raise NoHostError(uri)
    return host


def parse_host(host: str, suffix_list: SuffixList) -> DomainParts:
    """
    Decompose an already-extracted host.

    Args:
        host: Host name such as "www.example.co.uk"
        suffix_list: Rules to resolve the public suffix with

    Returns:
        DomainParts for the (decoded) host

    Raises:
        UnknownSuffixError: If no rule covers the host
        InvalidDomainError: If decoding fails or no second-level label remains
    """
    decoded = decode_host(host)
    suffix = find_suffix(decoded, suffix_list.store)
    return extract_parts(decoded, suffix)


def parse(uri: str, suffix_list: SuffixList) -> DomainParts:
    """
    Parse a URI into its domain parts.

    Args:
        uri: Any URI with an authority, e.g. "https://fun.packages.gleam.run"
        suffix_list: Rules to resolve the public suffix with

    Returns:
        DomainParts (e.g., tld "run", sld "gleam", subdomains ("fun", "packages"))

    Raises:
        InvalidUriError: If the string is not a valid URI
        NoHostError: If the URI has no host
        UnknownSuffixError: If no rule covers the host
        InvalidDomainError: If no second-level label remains
    """
    host = _extract_host(uri)
    logger.debug("Parsing host %s from %s", host, uri)
    return parse_host(host, suffix_list)
