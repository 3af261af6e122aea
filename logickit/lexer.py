"""Tokenizer for logical expressions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token in a logical expression."""

    VARIABLE = "Variable"
    CONSTANT = "Constant"
    AND = "And"
    OR = "Or"
    XOR = "Xor"
    NOT = "Not"
    NAND = "Nand"
    NOR = "Nor"
    IMPLIES = "Implies"
    IFF = "Iff"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    EOF = "EOF"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token with its text and its character offset in the input."""

    type: TokenType
    value: str
    position: int


_SYMBOLS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "&": TokenType.AND,
    "|": TokenType.OR,
    "^": TokenType.XOR,
    "!": TokenType.NOT,
    "¬": TokenType.NOT,
    "∧": TokenType.AND,
    "∨": TokenType.OR,
    "⊕": TokenType.XOR,
    "→": TokenType.IMPLIES,
    "↔": TokenType.IFF,
}

_ARROWS = (
    ("<->", TokenType.IFF),
    ("->", TokenType.IMPLIES),
)

_KEYWORDS = {
    "and": TokenType.AND,
    "or": TokenType.OR,
    "xor": TokenType.XOR,
    "not": TokenType.NOT,
    "nand": TokenType.NAND,
    "nor": TokenType.NOR,
    "implies": TokenType.IMPLIES,
    "iff": TokenType.IFF,
    "true": TokenType.CONSTANT,
    "t": TokenType.CONSTANT,
    "1": TokenType.CONSTANT,
    "false": TokenType.CONSTANT,
    "f": TokenType.CONSTANT,
    "0": TokenType.CONSTANT,
}


def _starts_identifier(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def _continues_identifier(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char == "_"


class Lexer:
    """Splits an expression into tokens, ending with an EOF token.

    Scanning stops at the first character that is not recognised; that
    character becomes an ERROR token, followed by EOF.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def lex(self) -> list[Token]:
        """All tokens of the input, the last one being EOF."""
        return list(self._scan())

    def _scan(self) -> Iterator[Token]:
        text = self.text
        pos = 0
        while pos < len(text):
            while pos < len(text) and text[pos].isspace():
                pos += 1
            if pos >= len(text):
                break
            token, pos = self._next_token(pos)
            yield token
            if token.type is TokenType.ERROR:
                break
        yield Token(TokenType.EOF, "", pos)

    def _next_token(self, start: int) -> tuple[Token, int]:
        text = self.text
        char = text[start]

        kind = _SYMBOLS.get(char)
        if kind is not None:
            return Token(kind, char, start), start + 1

        for symbol, kind in _ARROWS:
            if text.startswith(symbol, start):
                return Token(kind, symbol, start), start + len(symbol)

        if _starts_identifier(char):
            end = start + 1
            while end < len(text) and _continues_identifier(text[end]):
                end += 1
            word = text[start:end]
            kind = _KEYWORDS.get(word.lower(), TokenType.VARIABLE)
            return Token(kind, word, start), end

        return Token(TokenType.ERROR, char, start), start


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text``; shorthand for ``Lexer(text).lex()``."""
    return Lexer(text).lex()