import bisect

from ..utils.utils import detect_newline, normalize_line_endings


class TextDocument:
    """
    In-memory text document addressed by absolute offset or by (line, column).

    Line endings are stored as a single ``\\n`` character whatever the source used, so
    every line ending counts as one character for offset purposes. Offsets, lines and
    columns are all 1-based. The original newline sequence is restored by ``text()``.
    """

    def __init__(self, lines: list[str], newline: str = "\n"):
        if not lines:
            lines = [""]
        self._lines = list(lines)
        self.newline = newline
        self._line_starts = self._compute_line_starts()

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        newline = detect_newline(text)
        return cls(normalize_line_endings(text).split("\n"), newline=newline)

    def _compute_line_starts(self) -> list[int]:
        starts = []
        offset = 1
        for line in self._lines:
            starts.append(offset)
            offset += len(line) + 1
        return starts

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def end_offset(self) -> int:
        return self._line_starts[-1] + len(self._lines[-1])

    def get_line(self, line: int) -> str:
        self._check_line(line)
        return self._lines[line - 1]

    def text(self) -> str:
        return self.newline.join(self._lines)

    def normalized_text(self) -> str:
        return "\n".join(self._lines)

    def offset_of(self, line: int, column: int) -> int:
        self._check_line(line)
        if column < 1 or column > len(self._lines[line - 1]) + 1:
            raise ValueError(f"Column {column} is outside of line {line}.")
        return self._line_starts[line - 1] + column - 1

    def line_column_of(self, offset: int) -> tuple[int, int]:
        self._check_offset(offset)
        index = bisect.bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index] + 1

    def get_text(self, start: int, end: int) -> str:
        """Returns the normalized text between two offsets, in either order."""
        start, end = sorted((start, end))
        self._check_offset(start)
        self._check_offset(end)
        return self.normalized_text()[start - 1 : end - 1]

    def insert(self, offset: int, text: str) -> None:
        if "\n" in text or "\r" in text:
            raise ValueError("Inserted text must not contain line breaks.")
        if not text:
            return
        line, column = self.line_column_of(offset)
        current = self._lines[line - 1]
        self._lines[line - 1] = current[: column - 1] + text + current[column - 1 :]
        # Only the lines below the edited one move
        for index in range(line, len(self._line_starts)):
            self._line_starts[index] += len(text)

    def create_edit_point(self) -> "EditPoint":
        return EditPoint(self)

    def _check_line(self, line: int) -> None:
        if line < 1 or line > len(self._lines):
            raise ValueError(
                f"Line {line} is outside of the document ({len(self._lines)} lines)."
            )

    def _check_offset(self, offset: int) -> None:
        if offset < 1 or offset > self.end_offset:
            raise ValueError(
                f"Offset {offset} is outside of the document (1..{self.end_offset})."
            )


class EditPoint:
    """
    A movable position inside a ``TextDocument``.

    The edit point only stores an absolute offset. Line and column are derived from
    the document on every query, so they always reflect earlier insertions.
    """

    def __init__(self, document: TextDocument, offset: int = 1):
        self.document = document
        self._offset = offset

    @property
    def absolute_offset(self) -> int:
        return self._offset

    @property
    def line(self) -> int:
        return self.document.line_column_of(self._offset)[0]

    @property
    def line_char_offset(self) -> int:
        return self.document.line_column_of(self._offset)[1]

    @property
    def at_end_of_document(self) -> bool:
        return self._offset == self.document.end_offset

    @property
    def at_start_of_line(self) -> bool:
        return self.line_char_offset == 1

    def start_of_document(self) -> None:
        self._offset = 1

    def end_of_document(self) -> None:
        self._offset = self.document.end_offset

    def move_to_absolute_offset(self, offset: int) -> None:
        self.document.line_column_of(offset)
        self._offset = offset

    def move_to_line(self, line: int) -> None:
        self._offset = self.document.offset_of(line, 1)

    def start_of_line(self) -> None:
        self.move_to_line(self.line)

    def char_right(self, count: int = 1) -> None:
        line, column = self.document.line_column_of(self._offset)
        line_length = len(self.document.get_line(line))
        self._offset = self.document.offset_of(line, min(column + count, line_length + 1))

    def line_up(self, count: int = 1) -> None:
        line, column = self.document.line_column_of(self._offset)
        self._move_to_line_keeping_column(max(line - count, 1), column)

    def line_down(self, count: int = 1) -> None:
        line, column = self.document.line_column_of(self._offset)
        if line + count > self.document.line_count:
            self.end_of_document()
            return
        self._move_to_line_keeping_column(line + count, column)

    def _move_to_line_keeping_column(self, line: int, column: int) -> None:
        line_length = len(self.document.get_line(line))
        self._offset = self.document.offset_of(line, min(column, line_length + 1))

    def get_line(self) -> str:
        return self.document.get_line(self.line)

    def get_text(self, other: "EditPoint") -> str:
        return self.document.get_text(self._offset, other.absolute_offset)

    def insert(self, text: str) -> None:
        """Inserts text at the edit point and moves past it."""
        self.document.insert(self._offset, text)
        self._offset += len(text)
