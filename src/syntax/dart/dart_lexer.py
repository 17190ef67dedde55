"""
Dart Lexer

This module implements a lexer for Dart code, extending the functionality of the base lexer.
"""

import logging
from typing import Callable, ClassVar, List, Set

from syntax.lexer import Lexer, Token, TokenType


class DartLexer(Lexer):
    """
    Lexer for Dart code.

    This lexer handles Dart-specific syntax including nested block comments, raw and
    multi-line strings, numbers, metadata annotations, keywords and the naming conventions
    used for types and constants.

    Every input is accepted.  Unterminated strings and block comments run to the end of
    the input.
    """

    _KEYWORDS: ClassVar[Set[str]] = {
        'abstract', 'as', 'assert', 'async', 'await', 'break', 'case', 'catch',
        'class', 'const', 'continue', 'default', 'deferred', 'do', 'dynamic', 'else',
        'enum', 'export', 'external', 'extends', 'factory', 'false', 'final',
        'finally', 'for', 'get', 'if', 'implements', 'import', 'in', 'is', 'library',
        'new', 'null', 'operator', 'part', 'rethrow', 'return', 'set', 'static',
        'super', 'switch', 'sync', 'this', 'throw', 'true', 'try', 'typedef', 'var',
        'void', 'while', 'with', 'yield'
    }

    # Built-in types are highlighted as keywords
    _BUILT_IN_TYPES: ClassVar[Set[str]] = {'int', 'double', 'num', 'bool'}

    _IDENTIFIER_CHARS: ClassVar[Set[str]] = Lexer._LETTER_DIGIT_UNDERSCORE_CHARS | {'$'}
    _CONSTANT_CHARS: ClassVar[Set[str]] = set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")

    _OPERATORS: ClassVar[List[str]] = [
        '>>>=', '...?', '>>>', '>>=', '<<=', '~/=', '??=', '?..', '...',
        '==', '!=', '<=', '>=', '&&', '||', '??', '?.', '=>', '..', '++', '--',
        '+=', '-=', '*=', '/=', '%=', '&=', '|=', '^=', '<<', '>>', '~/',
        '[', ']', '{', '}', '(', ')', '.', '!', '=', '<', '>', '&', '|', '?',
        '+', '-', '*', '/', '%', '^', '~', ';', ':', ','
    ]

    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    def __init__(self) -> None:
        super().__init__()
        self._logger = logging.getLogger("DartLexer")

    def lex(self, input_str: str) -> List[Token]:
        """
        Lex all the tokens in the input.

        Args:
            input_str: The Dart source to lex

        Returns:
            The tokens covering the whole input, in order
        """
        tokens = super().lex(input_str)
        self._logger.debug("lexed %d characters into %d tokens", self._input_len, len(tokens))
        return tokens

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """
        if self._is_whitespace(ch):
            return self._read_whitespace

        if ch == '/':
            return self._read_forward_slash

        if ch == '#':
            return self._read_hash

        if ch in ('"', "'"):
            return self._read_string

        if ch == 'r':
            return self._read_r

        if self._is_digit(ch):
            return self._read_number

        if ch == '.':
            return self._read_dot

        if ch == '@':
            return self._read_annotation

        if self._is_letter(ch) or ch in ('_', '$'):
            return self._read_identifier_or_keyword

        return self._read_operator

    def _read_forward_slash(self) -> None:
        """
        Read a forward slash, which could be the start of a comment or an operator.
        """
        if self._position + 1 < self._input_len:
            if self._input[self._position + 1] == '/':
                self._read_comment()
                return

            if self._input[self._position + 1] == '*':
                self._read_block_comment()
                return

        self._read_operator()

    def _read_hash(self) -> None:
        """
        Read a '#', which is a script tag if it starts the input with '#!'.
        """
        if self._position == 0 and self._input.startswith('#!'):
            self._read_comment()
            return

        self._read_operator()

    def _read_r(self) -> None:
        """
        Read an 'r' character, which could be the start of a raw string or an identifier.
        """
        if (self._position + 1 < self._input_len and
                self._input[self._position + 1] in ('"', "'")):
            self._read_string()
            return

        self._read_identifier_or_keyword()

    def _read_dot(self) -> None:
        """
        Read a dot operator or the decimal point that starts a number such as '.5'.
        """
        if (self._position + 1 < self._input_len and
                self._is_digit(self._input[self._position + 1])):
            self._read_number()
            return

        self._read_operator()

    def _read_comment(self) -> None:
        """
        Read a single-line comment token, stopping before the newline.
        """
        start = self._position
        end = self._input.find('\n', start)
        self._position = self._input_len if end == -1 else end
        self._add_token(TokenType.COMMENT, start)

    def _read_block_comment(self) -> None:
        """
        Read a block comment token.

        Dart block comments nest, so each '/*' must be matched by its own '*/'.
        """
        start = self._position
        self._position += 2  # Skip /*
        depth = 1
        while depth > 0 and self._position + 1 < self._input_len:
            pair = self._input[self._position:self._position + 2]
            if pair == '*/':
                depth -= 1
                self._position += 2
                continue

            if pair == '/*':
                depth += 1
                self._position += 2
                continue

            self._position += 1

        # Unterminated comments consume the rest of the input
        if depth > 0:
            self._position = self._input_len

        self._add_token(TokenType.COMMENT, start)

    def _read_string(self) -> None:
        """
        Read a string literal token.

        Handles single and double quotes, triple-quoted multi-line strings and the 'r'
        prefix for raw strings.  Backslash escapes are honoured except in raw strings.
        Interpolations remain part of the string token.
        """
        start = self._position
        raw = False
        if self._input[self._position] == 'r':
            raw = True
            self._position += 1

        quote_char = self._input[self._position]
        quote = quote_char * 3 if self._input.startswith(quote_char * 3, self._position) else quote_char
        self._position += len(quote)

        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch == '\\' and not raw:
                self._position += 2
                continue

            if ch == quote_char and self._input.startswith(quote, self._position):
                self._position += len(quote)
                break

            self._position += 1

        # A trailing backslash can step past the end of the input
        self._position = min(self._position, self._input_len)
        self._add_token(TokenType.STRING, start)

    def _read_number(self) -> None:
        """
        Read a numeric literal token.

        Handles hexadecimal integers, decimal integers and doubles with optional fraction
        and exponent.  Only the longest valid prefix is consumed.
        """
        start = self._position

        if (self._input[self._position] == '0' and
                self._position + 2 < self._input_len and
                self._input[self._position + 1] in ('x', 'X') and
                self._is_hex_digit(self._input[self._position + 2])):
            self._position += 2
            self._read_digits(self._is_hex_digit)
            self._add_token(TokenType.NUMBER, start)
            return

        self._read_digits(self._is_digit)

        if (self._position + 1 < self._input_len and
                self._input[self._position] == '.' and
                self._is_digit(self._input[self._position + 1])):
            self._position += 1
            self._read_digits(self._is_digit)

        if self._position < self._input_len and self._input[self._position] in ('e', 'E'):
            exponent = self._position + 1
            if exponent < self._input_len and self._input[exponent] in ('+', '-'):
                exponent += 1

            if exponent < self._input_len and self._is_digit(self._input[exponent]):
                self._position = exponent
                self._read_digits(self._is_digit)

        self._add_token(TokenType.NUMBER, start)

    def _read_digits(self, is_digit: Callable[[str], bool]) -> None:
        """
        Read a run of digits, allowing '_' separators between digits.

        Args:
            is_digit: Predicate for the digits valid in this literal
        """
        while self._position < self._input_len:
            ch = self._input[self._position]
            if is_digit(ch):
                self._position += 1
                continue

            if ch != '_':
                break

            end = self._digit_separator_end(is_digit)
            if end == -1:
                break

            self._position = end

    def _digit_separator_end(self, is_digit: Callable[[str], bool]) -> int:
        """
        Find the end of a run of '_' digit separators at the current position.

        Returns:
            The position of the digit after the underscores, or -1 if the underscores do
            not sit between two digits
        """
        if self._position == 0 or not is_digit(self._input[self._position - 1]):
            return -1

        index = self._position
        while index < self._input_len and self._input[index] == '_':
            index += 1

        if index < self._input_len and is_digit(self._input[index]):
            return index

        return -1

    def _read_annotation(self) -> None:
        """
        Read a metadata annotation such as '@override'.
        """
        start = self._position
        self._position += 1

        # A lone '@' is not an annotation
        if (self._position >= self._input_len or
                self._is_digit(self._input[self._position]) or
                self._input[self._position] not in self._IDENTIFIER_CHARS):
            self._add_token(TokenType.TEXT, start)
            return

        while (self._position < self._input_len and
                self._input[self._position] in self._IDENTIFIER_CHARS):
            self._position += 1

        self._add_token(TokenType.KEYWORD, start)

    def _read_identifier_or_keyword(self) -> None:
        """
        Read an identifier or keyword token.
        """
        start = self._position
        self._position += 1
        while (self._position < self._input_len and
                self._input[self._position] in self._IDENTIFIER_CHARS):
            self._position += 1

        value = self._input[start:self._position]
        self._add_token(self._classify_identifier(value), start)

    def _classify_identifier(self, value: str) -> TokenType:
        """
        Classify an identifier by the keyword tables and Dart naming conventions.

        Args:
            value: The complete identifier

        Returns:
            KEYWORD, CONSTANT, TYPE or TEXT
        """
        if value in self._KEYWORDS or value in self._BUILT_IN_TYPES:
            return TokenType.KEYWORD

        # Library-private names keep the convention of their public form
        name = value.lstrip('_$')
        if not name:
            return TokenType.TEXT

        if self._is_constant_name(name):
            return TokenType.CONSTANT

        if name[0].isupper():
            return TokenType.TYPE

        return TokenType.TEXT

    def _is_constant_name(self, name: str) -> bool:
        """
        Check if a name follows a constant convention: 'MAX_SIZE' or 'kMaxSize'.
        """
        if len(name) < 2:
            return False

        if name[0] == 'k' and name[1].isupper():
            return True

        return all(ch in self._CONSTANT_CHARS for ch in name) and any(ch.isalpha() for ch in name)


def tokenize(input_str: str) -> List[Token]:
    """
    Split Dart source into classified tokens.

    Args:
        input_str: The source text, which need not be valid Dart

    Returns:
        Tokens whose values concatenate back to input_str
    """
    return DartLexer().lex(input_str)
