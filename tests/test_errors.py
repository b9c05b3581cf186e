"""Tests for scan error types."""

from __future__ import annotations

from pathlib import Path

from snippetfinder.errors import (
    ConfigurationError,
    DirectoryReadError,
    FileStatError,
    PreviewReadError,
    ScanError,
)


class TestScanError:
    """Test ScanError formatting."""

    def test_subclasses(self) -> None:
        """Every specific error is a ScanError."""
        for cls in (ConfigurationError, DirectoryReadError, FileStatError, PreviewReadError):
            assert issubclass(cls, ScanError)

    def test_os_error_reason(self) -> None:
        """OS errors are described by their strerror."""
        error = DirectoryReadError("/locked", PermissionError(13, "Permission denied", "/locked"))

        assert error.path == Path("/locked")
        assert error.reason == "Permission denied"
        assert str(error) == "Directory read: /locked: Permission denied"

    def test_string_cause(self) -> None:
        """Plain string causes are used verbatim."""
        error = ConfigurationError("/nope", "root directory does not exist")

        assert str(error) == "Configuration: /nope: root directory does not exist"

    def test_generic_exception_reason(self) -> None:
        """Other exceptions fall back to their message or type name."""
        assert FileStatError("/a", ValueError("bad")).reason == "bad"
        assert FileStatError("/a", ValueError()).reason == "ValueError"
