"""Syntax framework."""

from syntax.lexer import Token, TokenType, Lexer, tokens_to_text
from syntax.dart import DartLexer, tokenize


__all__ = [
    "DartLexer",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "tokens_to_text"
]
