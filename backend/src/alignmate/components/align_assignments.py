import logging
from typing import NamedTuple

from ..core.document import EditPoint, TextDocument
from ..utils.constants import (
    ASSIGNMENT_IGNORE_MARKERS,
    ASSIGNMENT_OPERATORS,
    MIN_ASSIGNMENT_GROUP_SIZE,
)
from ..utils.settings import AlignmentSettings

log = logging.getLogger(__name__)


class AssignmentOperator(NamedTuple):
    """
    An assignment found in a line.

    `position` is the zero-based column of the space preceding the operator, `operator_length`
    is the width category of the operator (1 for `=`, 2 for `+=`, 3 for `<<=`).
    """

    position: int
    operator_length: int


def align_assignments(
    document: TextDocument, settings: AlignmentSettings | None = None
) -> None:
    """
    Inserts spaces on adjacent assignment lines to align them vertically.

    Args:
        document: The document to align in place.
        settings: Alignment settings; the pass is skipped when assignments alignment is disabled.
    """
    if settings is None:
        settings = AlignmentSettings()
    if not settings.vertically_align_after_assignments:
        return

    found_assignments: list[AssignmentOperator] = []
    edit_point = document.create_edit_point()
    edit_point.start_of_document()
    for line in range(1, document.line_count + 1):
        edit_point.move_to_line(line)
        found_op = detect_assignment_operator(edit_point.get_line())
        if found_op is not None:
            found_assignments.append(found_op)
            continue
        if len(found_assignments) > MIN_ASSIGNMENT_GROUP_SIZE:
            _pad_assignments_to_align(
                edit_point, found_assignments, first_line=line - len(found_assignments)
            )
        found_assignments.clear()

    # The last lines of the document may form a group too
    if len(found_assignments) > MIN_ASSIGNMENT_GROUP_SIZE:
        _pad_assignments_to_align(
            edit_point,
            found_assignments,
            first_line=document.line_count - len(found_assignments) + 1,
        )


def detect_assignment_operator(line: str) -> AssignmentOperator | None:
    """
    Searches the line for an assignment and returns the leftmost one.

    The search is purely textual: operators must be surrounded by single spaces, and the line
    is rejected when a quote, an opening parenthesis or brace, or a line comment comes before
    the operator, since alignment is typically not desired in such cases.
    """
    best = None
    for pattern, operator_length in ASSIGNMENT_OPERATORS:
        position = line.find(pattern)
        # At column 0 there is nothing to assign to
        if position > 0 and (best is None or position < best.position):
            best = AssignmentOperator(position, operator_length)

    if best is None:
        return None

    for marker in ASSIGNMENT_IGNORE_MARKERS:
        ignore_char_start = line.find(marker)
        if 0 < ignore_char_start < best.position:
            return None

    return best


def _pad_assignments_to_align(
    edit_point: EditPoint, assignments: list[AssignmentOperator], first_line: int
) -> None:
    """
    Inserts spaces in front of each assignment of a group so that the operators end in the
    same column, hence the right hand sides start in the same column as well.

    Args:
        edit_point: An edit point in the document to modify.
        assignments: The assignments of the group ordered from top to bottom.
        first_line: The line of the first assignment.
    """
    longest_operator = max(a.operator_length for a in assignments)
    # The column the longest operator would start at once every operator ends in the same
    # column; a group that is already aligned gets no padding.
    target_column = max(a.position + a.operator_length for a in assignments) - longest_operator
    log.debug(
        "Aligning %d assignments from line %d to column %d",
        len(assignments),
        first_line,
        target_column,
    )

    edit_point.move_to_line(first_line)
    for a in assignments:
        edit_point.start_of_line()
        edit_point.char_right(a.position)
        padding = target_column - a.position + longest_operator - a.operator_length
        edit_point.insert(" " * padding)
        edit_point.line_down()
