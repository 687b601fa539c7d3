"""Tests for redaction logic."""

from careerbuilder_sdk._internal.redaction import REDACTED_VALUE, redact_headers, redact_url


class TestRedactHeaders:
    """Tests for redact_headers function."""

    def test_redacts_authorization(self):
        """Should redact the Authorization header."""
        headers = {"Authorization": "Bearer secret", "HostSite": "US"}
        result = redact_headers(headers)
        assert result["Authorization"] == REDACTED_VALUE
        assert result["HostSite"] == "US"

    def test_case_insensitive(self):
        """Header names should match regardless of case."""
        result = redact_headers({"authorization": "x", "X-Api-Key": "y"})
        assert result == {"authorization": REDACTED_VALUE, "X-Api-Key": REDACTED_VALUE}

    def test_does_not_mutate_input(self):
        """Original mapping should be unchanged."""
        headers = {"Authorization": "Bearer secret"}
        redact_headers(headers)
        assert headers == {"Authorization": "Bearer secret"}


class TestRedactUrl:
    """Tests for redact_url function."""

    def test_redacts_developer_key(self):
        """Should hide the developer key value."""
        result = redact_url("https://api.careerbuilder.com/jobs?DeveloperKey=ABC123&q=engineer")
        assert "ABC123" not in result
        assert result == "https://api.careerbuilder.com/jobs?DeveloperKey=[REDACTED]&q=engineer"

    def test_url_without_query(self):
        """URLs without a query should be returned unchanged."""
        url = "https://other.example.com/x"
        assert redact_url(url) == url

    def test_keeps_other_params(self):
        """Non-sensitive params should be preserved."""
        result = redact_url("https://other.example.com/x?page=2&Outputjson=true")
        assert result == "https://other.example.com/x?page=2&Outputjson=true"
