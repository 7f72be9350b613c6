from typing import Optional


class MinigrepError(Exception):
    """Base class for every failure minigrep reports to the caller."""


class ConfigError(MinigrepError):
    """The command-line arguments could not be turned into a Config."""


class MissingQuery(ConfigError):
    def __init__(self):
        super().__init__("Didn't get a query string")


class MissingFilePath(ConfigError):
    def __init__(self):
        super().__init__("Didn't get a file path")


class FileReadError(MinigrepError):
    """
    The target file could not be turned into text.
    Wraps the underlying OS/decoding/document error in `cause`.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        reason = str(cause) if cause is not None else "unknown error"
        super().__init__(f"Could not read {path}: {reason}")
