"""Non-fatal errors collected while scanning roots and loading previews."""

from __future__ import annotations

from pathlib import Path


class ScanError(Exception):
    """Failure tied to one path. Collected alongside results, never raised by a scan."""

    kind = "scan"

    def __init__(self, path: Path | str, cause: BaseException | str) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.describe()}: {self.path}: {self.reason}")

    @property
    def reason(self) -> str:
        if isinstance(self.cause, BaseException):
            return getattr(self.cause, "strerror", None) or str(self.cause) or type(self.cause).__name__
        return self.cause

    @classmethod
    def describe(cls) -> str:
        return cls.kind.replace("_", " ").capitalize()


class DirectoryReadError(ScanError):
    kind = "directory_read"


class FileStatError(ScanError):
    kind = "file_stat"


class ExcerptReadError(ScanError):
    kind = "excerpt_read"


class PreviewReadError(ScanError):
    kind = "preview_read"


class ConfigurationError(ScanError):
    """Root path configuration is unusable (missing, empty or not a directory)."""

    kind = "configuration"
