from .document import EditPoint, TextDocument
from .errors import AlignmentError, DeclarationParseError
