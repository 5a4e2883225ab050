"""Integration tests against the bundled suffix list."""

from __future__ import annotations

import idna
import pytest

from hostparts import (
    InvalidDomainError,
    UnknownSuffixError,
    load_suffix_list,
    parse,
)
from hostparts.core.constants import DEFAULT_SUFFIX_LIST_PATH


@pytest.fixture(scope="module")
def bundled():
    """Public section of the bundled list."""
    return load_suffix_list()


@pytest.fixture(scope="module")
def bundled_private():
    """Both sections of the bundled list."""
    return load_suffix_list(include_private=True)


class TestBundledData:
    """Tests for the bundled data file."""

    def test_file_is_packaged(self) -> None:
        """The bundled list sits inside the package."""
        assert DEFAULT_SUFFIX_LIST_PATH.is_file()

    def test_contains_generic_tlds(self, bundled) -> None:
        """Bundled list contains major generic TLDs."""
        for tld in ["com", "net", "org", "edu", "gov", "info", "biz"]:
            assert tld in bundled.store.exact, f"Missing generic TLD: {tld}"

    def test_private_rules_tagged(self, bundled_private) -> None:
        """Private rules are marked as non-public."""
        assert bundled_private.store.exact["github.io"].is_public is False
        assert bundled_private.store.exact["co.uk"].is_public is True


class TestReferenceScenarios:
    """End-to-end scenarios with the bundled list."""

    def test_gleam_run(self, bundled) -> None:
        """Registrable domain with no subdomains."""
        parts = parse("https://gleam.run", bundled)

        assert parts.top_level_domain == "run"
        assert parts.second_level_domain == "gleam"
        assert parts.transit_routing_domain == ""
        assert parts.subdomain_parts == ()

    def test_subdomains(self, bundled) -> None:
        """Subdomains are split off in order."""
        parts = parse("https://fun.packages.gleam.run", bundled)

        assert parts.top_level_domain == "run"
        assert parts.second_level_domain == "gleam"
        assert parts.transit_routing_domain == "fun.packages"
        assert parts.subdomain_parts == ("fun", "packages")

    def test_airline_aero(self, bundled) -> None:
        """Second-level public suffixes are matched."""
        parts = parse("https://gleam.airline.aero", bundled)

        assert parts.top_level_domain == "airline.aero"
        assert parts.second_level_domain == "gleam"
        assert parts.subdomain_parts == ()

    def test_www_ck(self, bundled) -> None:
        """The www.ck exception defeats the *.ck wildcard."""
        parts = parse("https://www.ck", bundled)

        assert parts.top_level_domain == "ck"
        assert parts.second_level_domain == "www"

    def test_punycode_tld(self, bundled) -> None:
        """Punycode suffixes are matched in Unicode form."""
        parts = parse("https://example.xn--mgbx4cd0ab", bundled)

        assert parts.top_level_domain == idna.decode("xn--mgbx4cd0ab")
        assert parts.second_level_domain == "example"

    def test_bare_com(self, bundled) -> None:
        """A bare TLD is not a registrable domain."""
        with pytest.raises(InvalidDomainError):
            parse("https://com", bundled)

    def test_city_exception(self, bundled) -> None:
        """city.kawasaki.jp is registrable under kawasaki.jp."""
        assert parse("https://city.kawasaki.jp", bundled).registrable_domain == "city.kawasaki.jp"
        assert parse("https://www.foo.kawasaki.jp", bundled).top_level_domain == "foo.kawasaki.jp"

    def test_private_section(self, bundled, bundled_private) -> None:
        """Private suffixes only apply when requested."""
        assert parse("https://me.github.io", bundled).registrable_domain == "github.io"
        assert parse("https://me.github.io", bundled_private).registrable_domain == "me.github.io"

    def test_unknown_tld(self, bundled) -> None:
        """TLDs missing from the list are reported."""
        with pytest.raises(UnknownSuffixError):
            parse("https://example.notatld", bundled)


class TestRealWorldHosts:
    """Hosts from across the full bundled list."""

    @pytest.mark.parametrize(
        ("uri", "suffix", "registrable"),
        [
            ("https://example.xyz", "xyz", "example.xyz"),
            ("https://www.example.co.za", "co.za", "example.co.za"),
            ("https://example.org.in", "org.in", "example.org.in"),
            ("https://blog.example.tech", "tech", "example.tech"),
            ("https://x.example.gc.ca", "gc.ca", "example.gc.ca"),
            ("https://news.bbc.co.uk", "co.uk", "bbc.co.uk"),
        ],
    )
    def test_registrable_domain(self, bundled, uri, suffix, registrable) -> None:
        """Common hosts resolve to the expected suffix."""
        parts = parse(uri, bundled)

        assert parts.top_level_domain == suffix
        assert parts.registrable_domain == registrable

    def test_keeps_section_markers(self) -> None:
        """The bundled file keeps the ICANN and private markers."""
        text = DEFAULT_SUFFIX_LIST_PATH.read_text(encoding="utf-8")

        assert "// ===BEGIN ICANN DOMAINS===" in text
        assert "// ===BEGIN PRIVATE DOMAINS===" in text
