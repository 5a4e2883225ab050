"""Split a host into suffix, second-level domain and subdomain labels."""

from __future__ import annotations

from .constants import LABEL_SEPARATOR
from .errors import InvalidDomainError
from .models import DomainParts


def extract_parts(host: str, suffix: str) -> DomainParts:
    """
    Decompose a host around its matched public suffix.

    Args:
        host: Full host (e.g., "fun.packages.gleam.run")
        suffix: Suffix found for it (e.g., "run")

    Returns:
        DomainParts with the label left of the suffix as second-level
        domain and anything further left as subdomains

    Raises:
        InvalidDomainError: If the host has no label left of the suffix, or
            a label left of the suffix is empty (e.g., "gleam..run")
    """
    host_labels = host.split(LABEL_SEPARATOR)
    suffix_labels = suffix.split(LABEL_SEPARATOR)

    remaining = len(host_labels) - len(suffix_labels)
    if remaining <= 0:
        raise InvalidDomainError(host, suffix)

    pre_suffix = host_labels[:remaining]
    if not all(pre_suffix):
        raise InvalidDomainError(host, suffix, reason="empty label")

    *subdomain_parts, second_level_domain = pre_suffix

    return DomainParts(
        top_level_domain=suffix,
        second_level_domain=second_level_domain,
        transit_routing_domain=LABEL_SEPARATOR.join(subdomain_parts),
        subdomain_parts=tuple(subdomain_parts),
    )
