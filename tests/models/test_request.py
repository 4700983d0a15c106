"""Tests for request models."""

import pydantic
import pytest

from contentblock.models.request import LoadType, Request, ResourceType


class TestRequest:
    """Tests for Request."""

    def test_defaults(self):
        """Test default resource and load types."""
        request = Request(url="http://example.com/")
        assert request.resource_type == ResourceType.DOCUMENT
        assert request.load_type == LoadType.FIRST_PARTY

    def test_tags_accepted(self):
        """Test that enum values can be given as their tags."""
        request = Request(url="http://example.com/", resource_type="svg-document", load_type="third-party")
        assert request.resource_type == ResourceType.SVG_DOCUMENT
        assert request.load_type == LoadType.THIRD_PARTY

    def test_frozen(self):
        """Test that requests cannot be modified."""
        request = Request(url="http://example.com/")
        with pytest.raises(pydantic.ValidationError):
            request.url = "http://other.com/"

    @pytest.mark.parametrize(
        "url,host",
        [
            ("http://example.com/ad.html", "example.com"),
            ("https://Sub.Example.COM:8443/path?q=1", "sub.example.com"),
            ("http://user:pw@example.com/", "example.com"),
            ("http://127.0.0.1/ad", None),
            ("http://[::1]/ad", None),
            ("file:///tmp/page.html", None),
            ("/relative/path", None),
            ("http://[broken/", None),
        ],
    )
    def test_host(self, url, host):
        """Test domain extraction from the URL."""
        assert Request(url=url).host == host

    @pytest.mark.parametrize(
        "url,canonical",
        [
            ("HTTP://BAD.ORG", "http://bad.org/"),
            ("https://Sub.Example.COM:8443/Path?Q=1", "https://sub.example.com:8443/Path?Q=1"),
            ("http://User:PW@Example.com/", "http://User:PW@example.com/"),
            ("http://example.com/ad.html", "http://example.com/ad.html"),
            ("file:///tmp/Page.html", "file:///tmp/Page.html"),
            ("data:text/plain,AD", "data:text/plain,AD"),
            ("/relative/Path", "/relative/Path"),
            ("http://[broken/", "http://[broken/"),
        ],
    )
    def test_canonical_url(self, url, canonical):
        """Test that only the scheme and host are lowercased and an empty path becomes /."""
        assert Request(url=url).canonical_url == canonical

    def test_derived_values_cached(self):
        """Test that the host and canonical URL are computed once per request."""
        request = Request(url="http://Example.com")
        assert request.host is request.host
        assert request.canonical_url is request.canonical_url
        assert request.__dict__["host"] == "example.com"

    def test_str(self):
        """Test human-readable formatting."""
        request = Request(url="http://example.com/", resource_type=ResourceType.IMAGE)
        assert str(request) == "http://example.com/ (image, first-party)"
