"""Tests for the bmvote exception hierarchy."""

from __future__ import annotations

import pytest


class TestBMVoteError:
    """Test base BMVoteError class."""

    def test_basic_error(self):
        """BMVoteError should work with just a message."""
        from bmvote.foundation.exceptions import BMVoteError

        err = BMVoteError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        from bmvote.foundation.exceptions import BMVoteError

        err = BMVoteError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)


class TestConfigurationErrors:
    def test_invalid_input_type_lists_registered_types(self):
        from bmvote.benchmark.generators import INPUT_TYPES
        from bmvote.foundation.exceptions import InvalidInputTypeError

        err = InvalidInputTypeError("zigzag", list(INPUT_TYPES))
        assert "zigzag" in str(err)
        assert "majority-heavy" in str(err)
        assert err.details["input_type"] == "zigzag"

    def test_invalid_input_type_custom_available(self):
        from bmvote.foundation.exceptions import InvalidInputTypeError

        err = InvalidInputTypeError("bad", available=["a", "b"])
        assert "a, b" in str(err)

    def test_invalid_size(self):
        from bmvote.foundation.exceptions import InvalidSizeError

        err = InvalidSizeError(-3, minimum=1)
        assert "-3" in str(err)
        assert ">= 1" in str(err)

    def test_invalid_parameter(self):
        from bmvote.foundation.exceptions import InvalidParameterError

        err = InvalidParameterError("threshold", 2.0, "a float in [0, 1)")
        assert "threshold" in str(err)
        assert err.details == {"name": "threshold", "value": 2.0}


class TestHierarchy:
    @pytest.mark.parametrize(
        "name, parent",
        [
            ("InvalidInputTypeError", "ConfigurationError"),
            ("InvalidSizeError", "ConfigurationError"),
            ("InvalidParameterError", "ConfigurationError"),
            ("ConfigFileNotFoundError", "ConfigurationError"),
            ("ResultsNotFoundError", "DataError"),
            ("ResultExportError", "DataError"),
            ("DependencyError", "BMVoteError"),
        ],
    )
    def test_subclassing(self, name, parent):
        from bmvote.foundation import exceptions

        assert issubclass(getattr(exceptions, name), getattr(exceptions, parent))
        assert issubclass(getattr(exceptions, name), exceptions.BMVoteError)

    def test_public_namespace_reexports(self):
        import bmvote.exceptions as public
        from bmvote.foundation import exceptions

        for name in exceptions.__all__:
            assert getattr(public, name) is getattr(exceptions, name)
        with pytest.raises(AttributeError):
            getattr(public, "NotAnError")

    def test_export_error_includes_reason(self):
        from bmvote.foundation.exceptions import ResultExportError

        err = ResultExportError("/tmp/x.csv", "Permission denied")
        assert "/tmp/x.csv" in str(err)
        assert "Permission denied" in str(err)

    def test_dependency_error_install_hint(self):
        from bmvote.foundation.exceptions import DependencyError

        err = DependencyError("pandas", "reporting")
        assert "pip install pandas" in str(err)
