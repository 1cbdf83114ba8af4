"""Tests for the individual link checks."""

from safelink.engine.checks import is_blacklisted, is_http, is_typosquatted


class TestIsHttp:
    def test_plain_http(self):
        assert is_http("http://example.com")

    def test_https(self):
        assert not is_http("https://example.com")

    def test_uppercase_scheme_not_matched(self):
        """Only the literal lowercase prefix counts."""
        assert not is_http("HTTP://example.com")

    def test_empty(self):
        assert not is_http("")


class TestIsBlacklisted:
    def test_exact_entry(self):
        assert is_blacklisted("evil.com", ["evil.com"])

    def test_substring_anywhere(self):
        assert is_blacklisted("notevil.com.phish.net", ["evil.com"])

    def test_no_match(self):
        assert not is_blacklisted("example.com", ["evil.com", "phish.net"])

    def test_empty_or_missing_blacklist(self):
        assert not is_blacklisted("evil.com", [])
        assert not is_blacklisted("evil.com", None)

    def test_empty_entry_ignored(self):
        assert not is_blacklisted("example.com", [""])

    def test_no_case_folding(self):
        assert not is_blacklisted("evil.com", ["EVIL.COM"])


class TestIsTyposquatted:
    def test_one_edit_away(self):
        assert is_typosquatted("gogle.com")
        assert is_typosquatted("amaz0n.com")
        assert is_typosquatted("paypa1.com")

    def test_two_edits_away(self):
        assert is_typosquatted("gooogle.co")

    def test_exact_match_not_flagged(self):
        assert not is_typosquatted("google.com")
        assert not is_typosquatted("wikipedia.org")

    def test_unrelated_domain(self):
        assert not is_typosquatted("example.com")
        assert not is_typosquatted("mail.google.com")

    def test_custom_trusted_list(self):
        assert is_typosquatted("mybank.cm", trusted_domains=("mybank.com",))
        assert not is_typosquatted("gogle.com", trusted_domains=("mybank.com",))
