import logging
from typing import NamedTuple

from pygments.lexers import get_lexer_by_name
from pygments.token import Comment, Error, Keyword, Name, Operator, Punctuation, Text, _TokenType
from pygments.util import ClassNotFound

from ..core.errors import DeclarationParseError
from .constants import (
    DECLARATION_HEADER_KEYWORDS,
    DECLARATION_MODIFIERS,
    DEFAULT_LANGUAGE,
    IDENTIFIER_KEYWORDS,
    TYPE_KEYWORDS,
)
from .utils import get_line_column

log = logging.getLogger(__name__)

BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


class _Token(NamedTuple):
    index: int
    ttype: _TokenType
    value: str


def parse_declaration_offsets(text: str, language: str = DEFAULT_LANGUAGE) -> list[int]:
    """
    Finds the variable declarations of a C-family source text.

    Args:
        text: Source text with normalized line endings.
        language: Pygments lexer alias, e.g. "csharp", "java" or "c".

    Returns:
        The zero-based offsets of the first declared identifier of every declaration,
        in source order.

    Raises:
        DeclarationParseError: If the language is unknown or the text cannot be tokenized
            or has unbalanced brackets.
    """
    tokens = _tokenize(text, language)
    _check_brackets(text, tokens)

    offsets = []
    at_statement_start = True
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if at_statement_start:
            # Attribute lists such as `[Obsolete]` precede the declaration they decorate
            if _is_symbol(token, "["):
                i = _skip_brackets(tokens, i, "[", "]")
                continue
            # Some lexers emit a whole attribute list as one token
            if token.ttype in Name.Attribute and token.value.startswith("["):
                i += 1
                continue
            identifier_index = _match_declaration(tokens, i)
            if identifier_index is not None:
                offsets.append(identifier_index)
            at_statement_start = False

        if _is_symbol(token, ";", "{", "}"):
            at_statement_start = True
        elif (
            _is_symbol(token, "(")
            and i > 0
            and tokens[i - 1].ttype in Keyword
            and tokens[i - 1].value in DECLARATION_HEADER_KEYWORDS
        ):
            at_statement_start = True
        i += 1

    log.debug("Found %d variable declarations", len(offsets))
    return offsets


def _tokenize(text: str, language: str) -> list[_Token]:
    try:
        lexer = get_lexer_by_name(language)
    except ClassNotFound:
        raise DeclarationParseError(f"Unknown language '{language}'")

    tokens = []
    # Unprocessed tokens keep their index into the raw text, which the offsets rely on
    for index, ttype, value in lexer.get_tokens_unprocessed(text):
        if ttype in Error:
            line, column = get_line_column(text, index)
            raise DeclarationParseError(f"Unexpected character {value!r}", line, column)
        if ttype in Comment or (ttype in Text and not value.strip()):
            continue
        if ttype in Punctuation or ttype in Operator:
            # Lexers differ in how they merge symbols, `>>` may close two generic lists
            tokens.extend(
                _Token(index + offset, ttype, char) for offset, char in enumerate(value)
            )
        else:
            tokens.append(_Token(index, ttype, value))
    return tokens


def _check_brackets(text: str, tokens: list[_Token]) -> None:
    stack = []
    for token in tokens:
        if _is_symbol(token, "(", "[", "{"):
            stack.append(token)
        elif _is_symbol(token, ")", "]", "}"):
            if not stack or stack[-1].value != BRACKET_PAIRS[token.value]:
                line, column = get_line_column(text, token.index)
                raise DeclarationParseError(f"Unbalanced {token.value!r}", line, column)
            stack.pop()
    if stack:
        line, column = get_line_column(text, stack[-1].index)
        raise DeclarationParseError(f"Unclosed {stack[-1].value!r}", line, column)


def _is_symbol(token: _Token, *values: str) -> bool:
    return (token.ttype in Punctuation or token.ttype in Operator) and token.value in values


def _skip_brackets(tokens: list[_Token], i: int, opening: str, closing: str) -> int:
    depth = 0
    while i < len(tokens):
        if _is_symbol(tokens[i], opening):
            depth += 1
        elif _is_symbol(tokens[i], closing):
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return i


def _match_declaration(tokens: list[_Token], i: int) -> int | None:
    """Returns the offset of the declared identifier if a declaration starts at token `i`."""
    n = len(tokens)
    while i < n and tokens[i].ttype in Keyword and tokens[i].value in DECLARATION_MODIFIERS:
        i += 1

    i = _skip_type(tokens, i)
    if i is None or i >= n or not _is_identifier(tokens[i]):
        return None
    identifier = tokens[i]

    i += 1
    if i < n and _is_symbol(tokens[i], "["):
        # C style array declarator: `int buffer[256];`
        i = _skip_brackets(tokens, i, "[", "]")
    if i >= n:
        return None

    follower = tokens[i]
    if _is_symbol(follower, ";", ","):
        return identifier.index
    if _is_symbol(follower, "="):
        # `==` compares and `=>` starts an expression body, neither declares anything
        if i + 1 < n and tokens[i + 1].index == follower.index + 1 and tokens[i + 1].value in ("=", ">"):
            return None
        return identifier.index
    return None


def _skip_type(tokens: list[_Token], i: int) -> int | None:
    """Returns the index of the first token after a type name, or None if there is none."""
    n = len(tokens)
    if i >= n:
        return None

    token = tokens[i]
    if token.ttype in Keyword.Type or (token.ttype in Keyword and token.value in TYPE_KEYWORDS):
        i += 1
        # `unsigned long long`
        while i < n and tokens[i].ttype in Keyword.Type:
            i += 1
    elif token.ttype in Name:
        i += 1
        while i + 1 < n:
            if _is_symbol(tokens[i], ".") and tokens[i + 1].ttype in Name:
                i += 2
            elif (
                i + 2 < n
                and _is_symbol(tokens[i], ":")
                and _is_symbol(tokens[i + 1], ":")
                and tokens[i + 2].ttype in Name
            ):
                i += 3
            else:
                break
    else:
        return None

    if i < n and _is_symbol(tokens[i], "<"):
        depth = 0
        while i < n:
            if _is_symbol(tokens[i], ";", "{", "}", "="):
                return None
            if _is_symbol(tokens[i], "<"):
                depth += 1
            elif _is_symbol(tokens[i], ">"):
                depth -= 1
            i += 1
            if depth == 0:
                break
        if depth != 0:
            return None

    while i < n:
        if _is_symbol(tokens[i], "?", "*"):
            i += 1
        elif _is_symbol(tokens[i], "["):
            # Only empty ranks like `[]` or `[,]` belong to the type
            j = i + 1
            while j < n and _is_symbol(tokens[j], ","):
                j += 1
            if j < n and _is_symbol(tokens[j], "]"):
                i = j + 1
            else:
                break
        else:
            break
    return i


def _is_identifier(token: _Token) -> bool:
    if token.ttype in Name:
        return True
    return token.ttype in Keyword and token.value in IDENTIFIER_KEYWORDS
