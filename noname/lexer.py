"""Turning source code into tokens, and a peekable stream of those tokens."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from noname.errors import CompileError, ErrorKind
from noname.span import Span

_DECIMAL = re.compile(r"[0-9][0-9_]*")
_HEX = re.compile(r"[0-9a-fA-F][0-9a-fA-F_]*")


class Keyword(Enum):
    """Reserved words of the language."""

    USE = "use"
    FN = "fn"
    LET = "let"
    PUB = "pub"
    RETURN = "return"
    TRUE = "true"
    FALSE = "false"
    MUT = "mut"
    IF = "if"
    ELSE = "else"
    FOR = "for"
    IN = "in"
    STRUCT = "struct"
    CONST = "const"

    @classmethod
    def parse(cls, text: str) -> Keyword | None:
        """Return the keyword spelled by ``text``, or None if it is not one."""
        try:
            return cls(text)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class TokenKind(Enum):
    """The kinds of token; the value of each member is its description."""

    KEYWORD = "keyword (use, let, etc.)"
    IDENTIFIER = "a lowercase alphanumeric (including underscore) string starting with a letter"
    BIG_UINT = "a number"
    DOT = "."
    DOUBLE_DOT = ".."
    COMMA = "`,`"
    COLON = "`:`"
    DOUBLE_COLON = "`::`"
    LEFT_PAREN = "`(`"
    RIGHT_PAREN = "`)`"
    LEFT_BRACKET = "`[`"
    RIGHT_BRACKET = "`]`"
    LEFT_CURLY_BRACKET = "`{`"
    RIGHT_CURLY_BRACKET = "`}`"
    SEMI_COLON = "`;`"
    SLASH = "`/`"
    COMMENT = "`//`"
    GREATER = "`>`"
    LESS = "`<`"
    EQUAL = "`=`"
    DOUBLE_EQUAL = "`==`"
    NOT_EQUAL = "`!=`"
    PLUS = "`+`"
    MINUS = "`-`"
    RIGHT_ARROW = "`->`"
    STAR = "`*`"
    AMPERSAND = "`&`"
    DOUBLE_AMPERSAND = "`&&`"
    PIPE = "`|`"
    DOUBLE_PIPE = "`||`"
    EXCLAMATION = "`!`"
    QUESTION = "`?`"

    def describe(self) -> str:
        """Return a human-readable description of this kind of token."""
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token: its kind, where it is, and its payload if the kind carries one.

    The payload is a Keyword for keywords, a str for identifiers and comments,
    and an int for numbers.
    """

    kind: TokenKind
    span: Span
    value: Keyword | str | int | None = None


@dataclass(frozen=True)
class Ident:
    """An identifier and where it appears."""

    value: str
    span: Span


# Single characters that may be followed by a second one forming a longer token.
_PAIRS: dict[str, tuple[str, TokenKind, TokenKind]] = {
    ".": (".", TokenKind.DOUBLE_DOT, TokenKind.DOT),
    ":": (":", TokenKind.DOUBLE_COLON, TokenKind.COLON),
    "=": ("=", TokenKind.DOUBLE_EQUAL, TokenKind.EQUAL),
    "-": (">", TokenKind.RIGHT_ARROW, TokenKind.MINUS),
    "&": ("&", TokenKind.DOUBLE_AMPERSAND, TokenKind.AMPERSAND),
    "|": ("|", TokenKind.DOUBLE_PIPE, TokenKind.PIPE),
    "!": ("=", TokenKind.NOT_EQUAL, TokenKind.EXCLAMATION),
}

_SINGLES: dict[str, TokenKind] = {
    ",": TokenKind.COMMA,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    "{": TokenKind.LEFT_CURLY_BRACKET,
    "}": TokenKind.RIGHT_CURLY_BRACKET,
    ";": TokenKind.SEMI_COLON,
    ">": TokenKind.GREATER,
    "<": TokenKind.LESS,
    "+": TokenKind.PLUS,
    "*": TokenKind.STAR,
    "?": TokenKind.QUESTION,
}


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _is_identifier_or_type(text: str) -> bool:
    return (
        bool(text)
        and text[0].isascii()
        and text[0].isalpha()
        and all(c.isascii() and (c.isalnum() or c == "_") for c in text[1:])
    )


def _parse_number(text: str, pattern: re.Pattern[str], base: int) -> int | None:
    if not pattern.fullmatch(text):
        return None
    return int(text.replace("_", ""), base)


class _Lexer:
    """Tracks the byte offset reached in a file while it is being split into tokens."""

    def __init__(self, filename_id: int) -> None:
        self.filename_id = filename_id
        self.offset = 0
        self.keep_comments = "NONAME_COMMENTS_IN_AST" in os.environ

    def error(self, kind: ErrorKind, length: int, *args: object) -> CompileError:
        return CompileError("lexer", kind, Span(self.filename_id, self.offset, length), *args)

    def token(self, kind: TokenKind, length: int, value: Keyword | str | int | None = None) -> Token:
        token = Token(kind, Span(self.filename_id, self.offset, length), value)
        self.offset += length
        return token

    def word(self, text: str) -> Token:
        length = _byte_len(text)
        keyword = Keyword.parse(text)
        if keyword is not None:
            return self.token(TokenKind.KEYWORD, length, keyword)

        number = _parse_number(text, _DECIMAL, 10)
        if number is not None:
            return self.token(TokenKind.BIG_UINT, length, number)

        if text.startswith("0x"):
            digits = text
            while digits.startswith("0x"):
                digits = digits[2:]
            number = _parse_number(digits, _HEX, 16)
            if number is None:
                raise self.error(ErrorKind.INVALID_HEX_LITERAL, length, text)
            return self.token(TokenKind.BIG_UINT, length, number)

        if _is_identifier_or_type(text):
            if length < 2:
                raise self.error(ErrorKind.NO_ONE_LETTER_VARIABLE, 1)
            return self.token(TokenKind.IDENTIFIER, length, text)

        raise self.error(ErrorKind.INVALID_IDENTIFIER, 1, text)

    def line(self, line: str) -> list[Token]:
        tokens: list[Token] = []
        word: list[str] = []
        position = 0

        while position < len(line):
            char = line[position]
            position += 1
            following = line[position] if position < len(line) else None

            if _is_word_char(char):
                word.append(char)
                continue
            if word:
                tokens.append(self.word("".join(word)))
                word.clear()

            if char in _SINGLES:
                tokens.append(self.token(_SINGLES[char], 1))
            elif char in _PAIRS:
                second, double, single = _PAIRS[char]
                if following == second:
                    tokens.append(self.token(double, 2))
                    position += 1
                else:
                    tokens.append(self.token(single, 1))
            elif char == "/":
                if following == "/":
                    comment = line[position + 1:]
                    token = self.token(TokenKind.COMMENT, 2 + _byte_len(comment), comment)
                    if self.keep_comments:
                        tokens.append(token)
                    return tokens
                tokens.append(self.token(TokenKind.SLASH, 1))
            elif char == " ":
                self.offset += 1
            else:
                raise self.error(ErrorKind.INVALID_TOKEN, 1)

        if word:
            tokens.append(self.word("".join(word)))
        return tokens


def _lines(code: str) -> list[str]:
    lines = code.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def tokenize(filename_id: int, code: str) -> Tokens:
    """Split source code into tokens, raising CompileError on invalid input."""
    lexer = _Lexer(filename_id)
    tokens: list[Token] = []
    for line in _lines(code):
        tokens.extend(lexer.line(line))
        lexer.offset += 1  # newline
    return Tokens(tokens)


class Tokens:
    """A stream of tokens that can be peeked at and remembers the last one taken."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._inner: Iterator[Token] = iter(tokens)
        self.peeked: Token | None = None
        self.last_token: Token | None = None

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        if self.peeked is None:
            self.peeked = next(self._inner, None)
        return self.peeked

    def bump(self) -> Token | None:
        """Consume and return the next token, or None at the end."""
        if self.peeked is not None:
            token, self.peeked = self.peeked, None
        else:
            token = next(self._inner, None)
        if token is not None:
            self.last_token = token
        return token

    def last_span(self) -> Span:
        """Return the span of the last token consumed."""
        return self.last_token.span if self.last_token is not None else Span()

    def _error(self, kind: ErrorKind, span: Span, *args: object) -> CompileError:
        return CompileError("parser", kind, span, *args)

    def bump_err(self, kind: ErrorKind) -> Token:
        """Consume the next token, raising an error of ``kind`` if there is none."""
        token = self.bump()
        if token is None:
            raise self._error(kind, self.last_span())
        return token

    def bump_expected(self, kind: TokenKind | Keyword) -> Token:
        """Consume the next token, which must be of ``kind`` (or that keyword)."""
        token = self.bump_err(ErrorKind.MISSING_TOKEN)
        if isinstance(kind, Keyword):
            matches = token.kind is TokenKind.KEYWORD and token.value is kind
            expected = TokenKind.KEYWORD
        else:
            matches = token.kind is kind
            expected = kind
        if not matches:
            raise self._error(ErrorKind.EXPECTED_TOKEN, self.last_span(), expected.describe())
        return token

    def bump_ident(self, kind: ErrorKind) -> Ident:
        """Consume the next token as an identifier, raising ``kind`` otherwise."""
        token = self.bump()
        if token is None:
            raise self._error(kind, self.last_span())
        if token.kind is not TokenKind.IDENTIFIER or not isinstance(token.value, str):
            raise self._error(kind, token.span)
        return Ident(token.value, token.span)