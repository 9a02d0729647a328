"""Tests for custom exceptions."""

from fitquery.exceptions import ExclusionPatternError, InvalidNodePathError


class TestExclusionPatternError:
    """Test ExclusionPatternError exception."""

    def test_exclusion_pattern_error_creation(self):
        error = ExclusionPatternError("Suite[")
        assert error.pattern == "Suite["
        assert str(error) == "Invalid exclusion pattern: 'Suite['"

    def test_exclusion_pattern_error_with_reason(self):
        error = ExclusionPatternError("", "pattern is empty")
        assert str(error) == "Invalid exclusion pattern: '' (pattern is empty)"

    def test_exclusion_pattern_error_is_value_error(self):
        assert isinstance(ExclusionPatternError("x"), ValueError)


class TestInvalidNodePathError:
    """Test InvalidNodePathError exception."""

    def test_invalid_node_path_error_creation(self):
        error = InvalidNodePathError(42)
        assert error.node_path == 42
        assert "Was int." in str(error)

    def test_invalid_node_path_error_is_type_error(self):
        assert isinstance(InvalidNodePathError(None), TypeError)
