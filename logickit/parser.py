"""Recursive-descent parser for logical expressions.

Precedence, loosest first: iff, implies (right associative), or/nor,
xor, and/nand, not.
"""

from __future__ import annotations

from collections.abc import Iterable

from logickit.errors import LogicError
from logickit.lexer import Token, TokenType, tokenize
from logickit.nodes import ASTNode, NodeType


class Parser:
    """Builds an :class:`ASTNode` tree from a list of tokens."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.EOF:
            end = self._tokens[-1].position + len(self._tokens[-1].value) if self._tokens else 0
            self._tokens.append(Token(TokenType.EOF, "", end))
        self._current = 0

    def parse(self) -> ASTNode:
        """Parse the whole token list; leftover tokens are an error."""
        tree = self._expression()
        if not self._at_end():
            token = self._peek()
            raise LogicError(
                "ParseExpression",
                f"unexpected token '{token.value}' at position {token.position}",
            )
        return tree

    def _expression(self) -> ASTNode:
        return self._iff()

    def _iff(self) -> ASTNode:
        expr = self._implication()
        while self._match(TokenType.IFF):
            right = self._implication()
            expr = ASTNode(
                NodeType.IFF, children=[expr, right], position=self._previous().position
            )
        return expr

    def _implication(self) -> ASTNode:
        expr = self._or()
        if self._match(TokenType.IMPLIES):
            right = self._implication()
            expr = ASTNode(
                NodeType.IMPLIES, children=[expr, right], position=self._previous().position
            )
        return expr

    def _or(self) -> ASTNode:
        expr = self._xor()
        while self._match(TokenType.OR, TokenType.NOR):
            operator = self._previous()
            right = self._xor()
            kind = NodeType.NOR if operator.type is TokenType.NOR else NodeType.OR
            expr = ASTNode(kind, children=[expr, right], position=operator.position)
        return expr

    def _xor(self) -> ASTNode:
        expr = self._and()
        while self._match(TokenType.XOR):
            operator = self._previous()
            right = self._and()
            expr = ASTNode(NodeType.XOR, children=[expr, right], position=operator.position)
        return expr

    def _and(self) -> ASTNode:
        expr = self._unary()
        while self._match(TokenType.AND, TokenType.NAND):
            operator = self._previous()
            right = self._unary()
            kind = NodeType.NAND if operator.type is TokenType.NAND else NodeType.AND
            expr = ASTNode(kind, children=[expr, right], position=operator.position)
        return expr

    def _unary(self) -> ASTNode:
        if self._match(TokenType.NOT):
            operator = self._previous()
            operand = self._unary()
            return ASTNode(NodeType.NOT, children=[operand], position=operator.position)
        return self._primary()

    def _primary(self) -> ASTNode:
        if self._match(TokenType.CONSTANT):
            token = self._previous()
            return ASTNode(NodeType.CONSTANT, token.value, position=token.position)

        if self._match(TokenType.VARIABLE):
            token = self._previous()
            return ASTNode(NodeType.VARIABLE, token.value, position=token.position)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            if not self._match(TokenType.RIGHT_PAREN):
                raise LogicError(
                    "Parser.parsePrimary",
                    f"expected ')' at position {self._peek().position}",
                )
            return expr

        raise LogicError(
            "Parser.parsePrimary",
            f"expected expression at position {self._peek().position}",
        )

    def _match(self, *kinds: TokenType) -> bool:
        if not self._at_end() and self._peek().type in kinds:
            self._current += 1
            return True
        return False

    def _at_end(self) -> bool:
        return self._peek().type is TokenType.EOF

    def _peek(self) -> Token:
        return self._tokens[self._current]

    def _previous(self) -> Token:
        return self._tokens[self._current - 1]


def parse_expression(expr: str) -> ASTNode:
    """Parse ``expr`` into a syntax tree, raising :class:`LogicError` on bad input."""
    tokens = tokenize(expr)
    for token in tokens:
        if token.type is TokenType.ERROR:
            raise LogicError(
                "ParseExpression",
                f"invalid character '{token.value}' at position {token.position}",
            )
    return Parser(tokens).parse()