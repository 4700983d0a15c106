"""Tests for domain sets."""

import pytest

from contentblock.rules import DomainSet


class TestFromDomains:
    """Tests for building domain sets from raw strings."""

    def test_exact_and_subdomain_split(self):
        """Test that the leading marker routes entries to the subdomain collection."""
        domains = DomainSet.from_domains(["bad.org", "*verybad.org", "*.dotted.org"])
        assert domains.exact == ("bad.org",)
        assert domains.subdomain == ("verybad.org", ".dotted.org")
        assert len(domains) == 3

    def test_to_domains_restores_markers(self):
        """Test that raw strings can be recovered."""
        domains = DomainSet.from_domains(["bad.org", "*verybad.org"])
        assert domains.to_domains() == ["bad.org", "*verybad.org"]


class TestMatches:
    """Tests for host membership."""

    @pytest.fixture
    def domains(self):
        return DomainSet.from_domains(["bad.org", "*verybad.org", "*notevil.com"])

    @pytest.mark.parametrize(
        "host,expected",
        [
            ("bad.org", True),
            ("ok.bad.org", False),
            ("verybad.org", True),
            ("notok.verybad.org", True),
            ("deep.notok.verybad.org", True),
            ("notverybad.org", False),
            ("notevil.com", True),
            ("evil.com", False),
            ("www.notevil.com", True),
            ("example.com", False),
        ],
    )
    def test_host(self, domains, host, expected):
        """Test exact, equal-suffix and strict-subdomain matches."""
        assert domains.matches(host) is expected

    def test_no_host_never_matches(self, domains):
        """Test that a missing host is never a member."""
        assert not domains.matches(None)

    def test_empty_set(self):
        """Test that an empty set matches nothing."""
        assert not DomainSet().matches("bad.org")
