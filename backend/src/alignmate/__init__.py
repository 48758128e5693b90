from .components import align_assignments, align_declarations_after_types_and_modifiers
from .core.align_code import align_code
from .core.document import EditPoint, TextDocument
from .core.errors import AlignmentError, DeclarationParseError
from .utils.settings import AlignmentSettings
