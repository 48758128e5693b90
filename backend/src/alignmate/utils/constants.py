import os

# Assignment patterns with their operator length category
ASSIGNMENT_OPERATORS = [
    (" = ", 1),
    (" += ", 2),
    (" *= ", 2),
    (" /= ", 2),
    (" %= ", 2),
    (" <<= ", 3),
    (" >>= ", 3),
    (" &= ", 2),
    (" |= ", 2),
    (" ^= ", 2),
]
# An assignment preceded by any of these is not aligned
ASSIGNMENT_IGNORE_MARKERS = ['"', "(", "{", "//"]

# Groups must be strictly larger than these to be padded
MIN_ASSIGNMENT_GROUP_SIZE = 1
MIN_DECLARATION_GROUP_SIZE = 2

NO_PREVIOUS_LINE = -2

DEFAULT_LANGUAGE = "csharp"

DECLARATION_MODIFIERS = {
    "abstract",
    "auto",
    "const",
    "enum",
    "event",
    "extern",
    "final",
    "fixed",
    "in",
    "internal",
    "mutable",
    "new",
    "out",
    "private",
    "protected",
    "public",
    "readonly",
    "ref",
    "register",
    "required",
    "scoped",
    "sealed",
    "static",
    "struct",
    "transient",
    "union",
    "unsafe",
    "using",
    "volatile",
}
TYPE_KEYWORDS = {
    "bool",
    "byte",
    "char",
    "decimal",
    "double",
    "dynamic",
    "float",
    "int",
    "long",
    "object",
    "sbyte",
    "short",
    "string",
    "uint",
    "ulong",
    "ushort",
    "var",
}
# Contextual keywords that are valid variable names
IDENTIFIER_KEYWORDS = {"add", "alias", "get", "global", "remove", "set", "value"}
# Keywords whose parenthesised header may open with a declaration. A `foreach`
# iteration variable is not a variable declaration.
DECLARATION_HEADER_KEYWORDS = {"for", "using", "fixed"}

ENV_ALIGN_ASSIGNMENTS = "ALIGNMATE_ALIGN_ASSIGNMENTS"
ENV_ALIGN_DECLARATIONS = "ALIGNMATE_ALIGN_DECLARATIONS"
ENV_LANGUAGE = "ALIGNMATE_LANGUAGE"

DEFAULT_PORT = os.getenv("ALIGNMATE_PORT") or "4000"
