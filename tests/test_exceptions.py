"""
Tests for the error hierarchy.
"""

from core.exceptions import ConfigurationError, DirectoryError, RecordSourceError, ValidationError


class TestDirectoryErrors:
    """Message and context handling"""

    def test_missing_context_is_dropped(self):
        error = RecordSourceError("Request failed", url="https://example.org", status_code=None)
        assert error.context == {'url': "https://example.org"}
        assert str(error) == "Request failed [url=https://example.org]"

    def test_plain_message(self):
        error = ConfigurationError("Error saving configuration")
        assert error.context == {}
        assert str(error) == "Error saving configuration"

    def test_validation_value_is_text(self):
        error = ValidationError("request_timeout must be a number of seconds", field='request_timeout', value=[1])
        assert error.context == {'field': 'request_timeout', 'value': "[1]"}

    def test_hierarchy(self):
        for cls in (ConfigurationError, RecordSourceError, ValidationError):
            assert issubclass(cls, DirectoryError)
