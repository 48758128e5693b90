from .align_assignments import AssignmentOperator, align_assignments, detect_assignment_operator
from .align_declarations import (
    DeclarationParser,
    align_declarations_after_types_and_modifiers,
    corrected_offset,
    pad_declarations_to_align,
)
