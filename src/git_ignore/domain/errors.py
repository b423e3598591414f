"""Errors raised while editing ignore files"""


class IgnoreFileError(Exception):
    """Base error for ignore file operations."""

    pass


class PatternValidationError(IgnoreFileError, ValueError):
    """Pattern argument was rejected before touching the filesystem."""

    pass


class IgnoreFileNotFoundError(IgnoreFileError, FileNotFoundError):
    """Ignore file does not exist but the operation needs it."""

    pass


class IgnoreFileReadError(IgnoreFileError):
    """Ignore file exists but could not be opened or scanned."""

    pass


class IgnoreFileWriteError(IgnoreFileError):
    """Ignore file could not be created or written."""

    pass
