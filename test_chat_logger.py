"""
Tests for log-line hygiene: sanitising, redaction and truncation.
"""

from chat_logger import sanitize_log_string, redact_sensitive, loggable


class TestLoggable:

    def test_newlines_are_flattened(self):
        assert sanitize_log_string("pay\n500\rnow\t") == "pay 500 now "

    def test_control_characters_removed(self):
        assert sanitize_log_string("a\x00b\x1bc") == "a b c"

    def test_phone_is_redacted(self):
        assert redact_sensitive("call +91-98765-43210 now") == "call [PHONE] now"
        assert redact_sensitive("my number is 9876543210") == "my number is [PHONE]"

    def test_aadhaar_is_redacted(self):
        assert redact_sensitive("aadhaar 1234 5678 9012") == "aadhaar [AADHAAR]"

    def test_amounts_are_kept(self):
        assert redact_sensitive("pay 500 rupees") == "pay 500 rupees"

    def test_truncation(self):
        text = loggable("x" * 150)
        assert text == "x" * 100 + "..."

    def test_none(self):
        assert loggable(None) == ""
