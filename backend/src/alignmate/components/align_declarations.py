import logging
from functools import partial
from typing import Callable, Iterable

from ..core.document import EditPoint, TextDocument
from ..utils.constants import MIN_DECLARATION_GROUP_SIZE, NO_PREVIOUS_LINE
from ..utils.declaration_parser import parse_declaration_offsets
from ..utils.settings import AlignmentSettings
from ..utils.utils import normalize_line_endings

log = logging.getLogger(__name__)

DeclarationParser = Callable[[str], Iterable[int]]


def corrected_offset(raw_offset: int, insertions_so_far: int) -> int:
    """
    Converts an offset found in the parsed text into a position in the live document.

    Parsed offsets are zero-based and refer to the text before any padding, while document
    offsets are one-based and shifted by every space inserted so far.
    """
    return raw_offset + insertions_so_far + 1


def align_declarations_after_types_and_modifiers(
    document: TextDocument,
    settings: AlignmentSettings | None = None,
    parser: DeclarationParser | None = None,
) -> None:
    """
    Inserts spaces on adjacent variable declaration lines to align the variable names vertically.

    Args:
        document: The document to align in place.
        settings: Alignment settings; the pass is skipped when declarations alignment is disabled.
        parser: Returns the zero-based offsets of the first identifier of every variable
            declaration in a text. Defaults to the pygments based parser for `settings.language`.

    Raises:
        DeclarationParseError: If the document cannot be parsed. The document is left untouched.
    """
    if settings is None:
        settings = AlignmentSettings()
    if not settings.vertically_align_after_types_and_modifiers:
        return
    if parser is None:
        parser = partial(parse_declaration_offsets, language=settings.language)

    edit_point = document.create_edit_point()
    edit_point.start_of_document()
    end = document.create_edit_point()
    end.end_of_document()
    # Parsed offsets are only comparable with document offsets if every line ending
    # counts as a single character, as it does inside the document.
    doc_text = normalize_line_endings(edit_point.get_text(end))
    absolute_start_points = sorted(parser(doc_text))

    running_offset = 0
    prev_line = NO_PREVIOUS_LINE
    adjacent_line_offsets: list[int] = []
    for point in absolute_start_points:
        edit_point.move_to_absolute_offset(corrected_offset(point, running_offset))
        current_line = edit_point.line
        # Another declaration on the same line is not aligned
        if current_line != prev_line:
            if current_line - 1 == prev_line:
                adjacent_line_offsets.append(corrected_offset(point, running_offset))
            else:
                if len(adjacent_line_offsets) > MIN_DECLARATION_GROUP_SIZE:
                    running_offset += pad_declarations_to_align(edit_point, adjacent_line_offsets)
                adjacent_line_offsets = [corrected_offset(point, running_offset)]
            prev_line = current_line

    if len(adjacent_line_offsets) > MIN_DECLARATION_GROUP_SIZE:
        running_offset += pad_declarations_to_align(edit_point, adjacent_line_offsets)
    log.debug("Inserted %d spaces to align declarations", running_offset)


def pad_declarations_to_align(edit_point: EditPoint, offsets: list[int]) -> int:
    """
    Aligns the starting points of variables to the same column.

    Args:
        edit_point: An edit point in the document to modify.
        offsets: The live document offsets of the variables to align, top to bottom.

    Returns:
        The number of spaces inserted.
    """
    target_column = 0
    for offset in offsets:
        edit_point.move_to_absolute_offset(offset)
        target_column = max(target_column, edit_point.line_char_offset)

    running_offset = 0
    for offset in offsets:
        # Padding earlier lines of the group shifts the later ones
        edit_point.move_to_absolute_offset(offset + running_offset)
        padding = target_column - edit_point.line_char_offset
        edit_point.insert(" " * padding)
        running_offset += padding
    return running_offset
