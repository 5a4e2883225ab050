"""Core data models for hostparts.

All models are immutable. Operations that "change" a rule set build and
return a new value, so a loaded SuffixList can be shared freely.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _frozen_mapping(data: Mapping[str, Rule] | None = None) -> Mapping[str, Rule]:
    """Return a read-only copy of a rule mapping."""
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class Rule:
    """A single suffix rule as stored in a RuleStore."""

    pattern: str  # "co.uk"; parent domain for wildcards ("ck" for "*.ck")
    is_public: bool  # False when read from the private section
    length: int = field(init=False)  # Character length of pattern, introspection only

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", len(self.pattern))


@dataclass(frozen=True)
class RuleStore:
    """
    Suffix rules partitioned by kind.

    A wildcard rule "*.X" registers X in both ``exact`` and ``wildcards``,
    since the bare parent is itself a public suffix. Exceptions win over
    both for the exact candidate they name.
    """

    # Read-only mappings are unhashable, so only wildcards feed __hash__
    exact: Mapping[str, Rule] = field(default_factory=_frozen_mapping, hash=False)
    wildcards: frozenset[str] = field(default_factory=frozenset)
    exceptions: Mapping[str, Rule] = field(default_factory=_frozen_mapping, hash=False)

    @classmethod
    def build(
        cls,
        exact: Mapping[str, Rule] | None = None,
        wildcards: set[str] | frozenset[str] | None = None,
        exceptions: Mapping[str, Rule] | None = None,
    ) -> RuleStore:
        """Create a store from mutable collections, copying them."""
        return cls(
            exact=_frozen_mapping(exact),
            wildcards=frozenset(wildcards or ()),
            exceptions=_frozen_mapping(exceptions),
        )

    @property
    def rule_count(self) -> int:
        """Number of entries held across the three categories."""
        return len(self.exact) + len(self.wildcards) + len(self.exceptions)


@dataclass(frozen=True)
class SuffixList:
    """Caller-facing handle around a loaded RuleStore."""

    store: RuleStore = field(default_factory=RuleStore)

    def __len__(self) -> int:
        return self.store.rule_count


@dataclass(frozen=True)
class DomainParts:
    """Structured result of decomposing a host."""

    top_level_domain: str  # Matched public suffix, may hold several labels ("co.uk")
    second_level_domain: str  # Single registrable label left of the suffix
    transit_routing_domain: str  # subdomain_parts joined with ".", "" if none
    subdomain_parts: tuple[str, ...] = ()  # Left-to-right as in the host

    @property
    def registrable_domain(self) -> str:
        """Second-level domain plus suffix, e.g. "example.co.uk"."""
        return f"{self.second_level_domain}.{self.top_level_domain}"

    @property
    def host(self) -> str:
        """Reassemble the full host from its parts."""
        if self.transit_routing_domain:
            return f"{self.transit_routing_domain}.{self.registrable_domain}"
        return self.registrable_domain

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "top_level_domain": self.top_level_domain,
            "second_level_domain": self.second_level_domain,
            "transit_routing_domain": self.transit_routing_domain,
            "subdomain_parts": list(self.subdomain_parts),
        }

    @classmethod
    def from_dict(cls, data: dict) -> DomainParts:
        """Create instance from dictionary."""
        subdomain_parts = tuple(data.get("subdomain_parts", ()))
        return cls(
            top_level_domain=data["top_level_domain"],
            second_level_domain=data["second_level_domain"],
            transit_routing_domain=data.get("transit_routing_domain", ".".join(subdomain_parts)),
            subdomain_parts=subdomain_parts,
        )
