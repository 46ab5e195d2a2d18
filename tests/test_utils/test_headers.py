"""Tests for header normalization."""

import httpx

from bearer_agent.utils.headers import normalize_headers


class TestNormalizeHeaders:
    """Test suite for normalize_headers."""

    def test_first_value_wins(self):
        """Only the first of several values is kept."""
        headers = httpx.Headers([
            ("Set-Cookie", "a=1"),
            ("Set-Cookie", "b=2"),
            ("Set-Cookie", "c=3"),
        ])

        assert normalize_headers(headers) == {"Set-Cookie": "a=1"}

    def test_preserves_key_casing(self):
        """Keys come out exactly as they were sent."""
        headers = httpx.Headers({"Hello": "World", "x-lower": "yes"})

        result = normalize_headers(headers)

        assert result == {"Hello": "World", "x-lower": "yes"}

    def test_empty_headers(self):
        """Empty input gives an empty mapping."""
        assert normalize_headers(httpx.Headers()) == {}
        assert normalize_headers({}) == {}

    def test_mapping_of_sequences(self):
        """Plain mappings of name to values are collapsed too."""
        headers = {
            "Accept": ["application/json", "text/plain"],
            "X-Single": ["one"],
        }

        assert normalize_headers(headers) == {
            "Accept": "application/json",
            "X-Single": "one",
        }

    def test_mapping_with_empty_sequence_skips_key(self):
        """A name with no values has nothing to report."""
        assert normalize_headers({"X-Empty": [], "X-Set": ["v"]}) == {"X-Set": "v"}

    def test_mapping_with_string_value(self):
        """A bare string is treated as a single value, not a sequence of characters."""
        assert normalize_headers({"Host": "example.com"}) == {"Host": "example.com"}

    def test_does_not_mutate_input(self):
        """Normalization leaves the source collection intact."""
        headers = httpx.Headers([("Via", "1.1 a"), ("Via", "1.1 b")])

        normalize_headers(headers)

        assert headers.get_list("Via") == ["1.1 a", "1.1 b"]

    def test_case_variants_are_one_header(self):
        """Names differing only in case collapse to the first spelling and value."""
        headers = httpx.Headers([("Set-Cookie", "a=1"), ("set-cookie", "b=2")])

        result = normalize_headers(headers)

        assert result == {"Set-Cookie": "a=1"}
        assert len(result) == len(headers.keys())
