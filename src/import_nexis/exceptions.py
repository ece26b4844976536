"""Errors raised by the Nexis import pipeline."""


class InputNotFoundError(FileNotFoundError):
    """The given path is neither an existing file nor a directory."""

    def __init__(self, path) -> None:
        super().__init__(f"{path} does not exist")
        self.path = path


class UnparseableMarkupError(ValueError):
    """Normalized markup could not be turned into a document tree."""
