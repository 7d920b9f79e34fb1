"""Exceptions raised by the dependency scanner."""


class DepGraphError(Exception):
    """Base class for all scanner errors."""


class ConfigLoadError(DepGraphError):
    """A configuration source (project config or alias table) could not be used."""


class FileSystemError(DepGraphError):
    """The scan root is missing or a directory in it cannot be listed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot scan '{path}': {reason}")


class ParseError(DepGraphError):
    """An extracted import statement does not split into names and source."""

    def __init__(self, statement: str, file_path: str = ""):
        self.statement = statement
        self.file_path = file_path
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"malformed import statement{location}: {statement!r}")
