import logging

from ..components import (
    DeclarationParser,
    align_assignments,
    align_declarations_after_types_and_modifiers,
)
from ..utils.settings import AlignmentSettings
from .document import TextDocument
from .errors import DeclarationParseError

log = logging.getLogger(__name__)


def align_code(
    code: str,
    settings: AlignmentSettings | None = None,
    parser: DeclarationParser | None = None,
) -> str:
    """
    Runs both vertical alignment passes over the code.

    Declarations are aligned before assignments: padding a variable name moves the operator
    that follows it, while padding an operator never moves a variable name.

    Args:
        code: Source code, with any line endings.
        settings: Which passes to run and which language to parse. Read from the
            environment if not given.
        parser: Optional replacement for the declaration parser.

    Returns:
        The aligned code with the original line endings.
    """
    if settings is None:
        settings = AlignmentSettings.from_env()
    document = TextDocument.from_text(code)

    try:
        align_declarations_after_types_and_modifiers(document, settings=settings, parser=parser)
    except DeclarationParseError as e:
        # The declaration pass edits nothing before parsing, so the assignments pass can go on
        log.error("Skipping declarations alignment: %s", e)

    align_assignments(document, settings=settings)
    return document.text()
