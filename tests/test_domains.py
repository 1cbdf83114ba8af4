"""Tests for domain extraction and blacklist input cleanup."""

import pytest

from safelink.utils.domains import clean_blacklist_entry, get_domain_from_url


class TestGetDomainFromUrl:
    def test_strips_www_path_and_query(self):
        assert get_domain_from_url("https://www.google.com/search?q=test") == "google.com"

    def test_lowercases_host(self):
        assert get_domain_from_url("https://WWW.Google.COM/") == "google.com"

    def test_keeps_other_subdomains(self):
        assert get_domain_from_url("https://mail.google.com/inbox") == "mail.google.com"

    def test_strips_only_one_www(self):
        assert get_domain_from_url("https://www.www.example.com") == "www.example.com"

    def test_ignores_port(self):
        assert get_domain_from_url("http://example.com:8080/path") == "example.com"

    def test_idn_host_is_punycoded(self):
        assert get_domain_from_url("https://bücher.de/") == "xn--bcher-kva.de"

    @pytest.mark.parametrize(
        "url",
        [
            "mailto:test@test.com",
            "javascript:void(0)",
            "tel:+15555550100",
            "/relative/path",
            "example.com",
            "http://[::1",
            "",
            None,
        ],
    )
    def test_no_domain(self, url):
        assert get_domain_from_url(url) is None


class TestCleanBlacklistEntry:
    def test_strips_scheme_www_and_path(self):
        assert clean_blacklist_entry("  HTTPS://www.Evil.com/path ") == "evil.com"

    def test_plain_domain_unchanged(self):
        assert clean_blacklist_entry("evil.com") == "evil.com"

    def test_http_scheme(self):
        assert clean_blacklist_entry("http://phish.net/login?x=1") == "phish.net"

    def test_keeps_subdomains(self):
        assert clean_blacklist_entry("login.evil.com") == "login.evil.com"

    def test_empty(self):
        assert clean_blacklist_entry("   ") == ""
        assert clean_blacklist_entry("https://www.") == ""
