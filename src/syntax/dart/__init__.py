"""
Dart syntax highlighting module.

This module provides tokenization of Dart source code for syntax highlighting.
"""

from syntax.dart.dart_lexer import DartLexer, tokenize

__all__ = [
    'DartLexer',
    'tokenize',
]
