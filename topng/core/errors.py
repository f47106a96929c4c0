"""Exceptions raised for user-facing input problems."""

from pathlib import Path


class ConversionInputError(Exception):
    """Exception raised when the input cannot be converted.

    The message is the exact text shown to the user.
    """

    pass


class InputFileNotFoundError(ConversionInputError):
    def __init__(self, path: str | Path):
        self.path = path
        super().__init__(f"File {path} does not exist")


class UnsupportedFileTypeError(ConversionInputError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")


class UnexpectedFileTypeError(ConversionInputError):
    """Raised when an extension the classifier rejected reaches the importer."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unexpected file type: {extension}")
