def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def detect_newline(text: str) -> str:
    """
    Returns the newline sequence used by the text.
    Windows line endings win over old Mac ones; texts without line breaks default to ``\\n``.
    """
    if "\r\n" in text:
        return "\r\n"
    if "\r" in text:
        return "\r"
    return "\n"


def get_line_column(text: str, index: int) -> tuple[int, int]:
    """Converts a zero-based index into normalized text to a 1-based line and column."""
    line = text.count("\n", 0, index) + 1
    column = index - (text.rfind("\n", 0, index) + 1) + 1
    return line, column


def read_code(input_file: str) -> str:
    try:
        with open(input_file, "r", newline="") as f:
            return f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Input file '{input_file}' not found")


def write_code(output_file: str, code: str) -> None:
    # newline="" keeps the line endings restored by the document
    with open(output_file, "w", newline="") as f:
        f.write(code)
