"""Tests for edit distance."""

import pytest
from rapidfuzz.distance import Levenshtein

from safelink.constants import TRUSTED_DOMAINS
from safelink.engine.levenshtein import levenshtein


class TestLevenshtein:
    """Test Levenshtein distance."""

    @pytest.mark.parametrize(
        "s1, s2, expected",
        [
            ("google.com", "gogle.com", 1),
            ("amazon.com", "amaz0n.com", 1),
            ("paypal.com", "paypa1.com", 1),
            ("google.com", "facebook.com", 8),
            ("kitten", "sitting", 3),
        ],
    )
    def test_known_distances(self, s1, s2, expected):
        assert levenshtein(s1, s2) == expected

    def test_trusted_domains_match_themselves(self):
        for domain in TRUSTED_DOMAINS:
            assert levenshtein(domain, domain) == 0

    def test_case_insensitive(self):
        assert levenshtein("Google.com", "google.com") == 0
        assert levenshtein("PAYPAL.COM", "paypa1.com") == 1

    def test_empty_strings(self):
        assert levenshtein("", "") == 0
        assert levenshtein("", "abc") == 3
        assert levenshtein("abcd", "") == 4

    def test_symmetric(self):
        assert levenshtein("faceboook.com", "facebook.com") == levenshtein("facebook.com", "faceboook.com")
        assert levenshtein("a", "google.com") == levenshtein("google.com", "a")

    def test_triangle_inequality(self):
        a, b, c = "gogle.com", "google.com", "googel.com"
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)

    def test_agrees_with_rapidfuzz(self):
        """Cross-check against an independent implementation."""
        candidates = ["gooogle.com", "yotube.com", "lnkedin.com", "wikipedia.net", "x.com", "rn.com"]
        for candidate in candidates:
            for trusted in TRUSTED_DOMAINS:
                assert levenshtein(candidate, trusted) == Levenshtein.distance(candidate, trusted)
