class AlignmentError(Exception):
    """Base class for errors raised while aligning a document."""


class DeclarationParseError(AlignmentError, ValueError):
    """The document could not be parsed into variable declarations."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column
