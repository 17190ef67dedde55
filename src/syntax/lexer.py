from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Callable, ClassVar, Dict, Iterable, List, Set


class TokenType(IntEnum):
    """
    Category of a lexical token.

    This set is closed: each member maps to exactly one style slot in a code viewer theme.
    """
    TEXT = auto()
    TYPE = auto()
    COMMENT = auto()
    STRING = auto()
    NUMBER = auto()
    KEYWORD = auto()
    PUNCTUATION = auto()
    CONSTANT = auto()


@dataclass(frozen=True)
class Token:
    """
    Represents a token in the input stream.

    Attributes:
        type: The type of the token
        value: The exact text of the token, including any delimiters
        start: The starting position of the token in the input stream
    """
    type: TokenType
    value: str
    start: int


def tokens_to_text(tokens: Iterable[Token]) -> str:
    """
    Rebuild the original input from a token stream.

    Args:
        tokens: Tokens in stream order

    Returns:
        The concatenated token values
    """
    return "".join(token.value for token in tokens)


class Lexer(ABC):
    """
    Base lexer class.

    A lexer walks its whole input once, left to right.  Each lexing function consumes at
    least one character and appends exactly one token, so the token values always
    partition the input.
    """

    # Character lookup tables - shared by all subclasses
    _WHITESPACE_CHARS: ClassVar[Set[str]] = set(" \t\n\r\v\f\u00A0\u1680\u2028\u2029\u202F\u205F\u3000\uFEFF")
    _LETTER_CHARS: ClassVar[Set[str]] = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
    _LETTER_DIGIT_UNDERSCORE_CHARS: ClassVar[Set[str]] = set(
        "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
    )
    _DIGIT_CHARS: ClassVar[Set[str]] = set("0123456789")
    _HEX_CHARS: ClassVar[Set[str]] = set("0123456789abcdefABCDEF")

    # Add the Unicode whitespace range \u2000-\u200A
    for i in range(0x2000, 0x200B):
        _WHITESPACE_CHARS.add(chr(i))

    # Default empty operator map - to be overridden by subclasses
    _OPERATORS: ClassVar[List[str]] = []
    _OPERATORS_MAP: ClassVar[Dict[str, List[str]]] = {}

    def __init__(self) -> None:
        self._input: str = ""
        self._input_len: int = 0
        self._position: int = 0
        self._tokens: List[Token] = []
        self._next_token: int = 0

    @abstractmethod
    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """

    def lex(self, input_str: str) -> List[Token]:
        """
        Lex a complete input string.

        Args:
            input_str: The input string to lex

        Returns:
            The tokens covering the whole input, in order
        """
        self._input = input_str
        self._input_len = len(input_str)
        self._position = 0
        self._tokens = []
        self._next_token = 0
        self._inner_lex()
        return list(self._tokens)

    def _inner_lex(self) -> None:
        """
        Lex all the tokens in the input.
        """
        while self._position < self._input_len:
            ch = self._input[self._position]
            self._get_lexing_function(ch)()

    def get_next_token(self) -> Token | None:
        """
        Gets the next token from the input.

        Returns:
            The next Token available or None if there are no tokens left.
        """
        if self._next_token >= len(self._tokens):
            return None

        token = self._tokens[self._next_token]
        self._next_token += 1
        return token

    def peek_next_token(self, offset: int = 0) -> Token | None:
        """
        Get the token that is 'offset' positions ahead.

        Args:
            offset: How many tokens to look ahead (default 0)

        Returns:
            The token at the specified offset, or None if none found
        """
        index = self._next_token + offset
        if index < 0 or index >= len(self._tokens):
            return None

        return self._tokens[index]

    def _add_token(self, token_type: TokenType, start: int) -> None:
        """
        Append a token spanning from start to the current position.
        """
        self._tokens.append(Token(type=token_type, value=self._input[start:self._position], start=start))

    def _read_whitespace(self) -> None:
        """
        Reads a run of whitespace in the input.
        """
        start = self._position
        self._position += 1

        while self._position < self._input_len and self._input[self._position] in self._WHITESPACE_CHARS:
            self._position += 1

        self._add_token(TokenType.TEXT, start)

    def _read_operator(self) -> None:
        """
        Generic implementation of operator reading using the operator map.

        The operator map should be a dictionary where:
        - Keys are the first characters of operators
        - Values are lists of operators starting with that character,
          ordered from longest to shortest to ensure greedy matching

        A character that starts no operator becomes a single plain text token.
        """
        first_char = self._input[self._position]
        potential_operators = self._OPERATORS_MAP.get(first_char, [])

        # Try to match the longest operator first
        for op in potential_operators:
            if self._input.startswith(op, self._position):
                start = self._position
                self._position += len(op)
                self._add_token(TokenType.PUNCTUATION, start)
                return

        start = self._position
        self._position += 1
        self._add_token(TokenType.TEXT, start)

    @staticmethod
    def build_operator_map(operators: List[str]) -> Dict[str, List[str]]:
        """
        Build an operator map from a list of operators.

        Args:
            operators: List of operator strings

        Returns:
            A dictionary mapping first characters to lists of operators
            starting with that character, sorted by length (longest first)
        """
        operator_map: Dict[str, List[str]] = {}
        for op in operators:
            if not op:
                continue

            operator_map.setdefault(op[0], []).append(op)

        # Sort each list by length, longest first to ensure greedy matching
        for operators_list in operator_map.values():
            operators_list.sort(key=len, reverse=True)

        return operator_map

    def _is_letter(self, ch: str) -> bool:
        """
        Determines if a character is a letter.
        """
        return ch in self._LETTER_CHARS

    def _is_digit(self, ch: str) -> bool:
        """
        Determines if a character is a digit.
        """
        return ch in self._DIGIT_CHARS

    def _is_hex_digit(self, ch: str) -> bool:
        """
        Determines if a character is a hexadecimal digit.
        """
        return ch in self._HEX_CHARS

    def _is_letter_or_digit_or_underscore(self, ch: str) -> bool:
        """
        Determines if a character is a letter, digit, or underscore.
        """
        return ch in self._LETTER_DIGIT_UNDERSCORE_CHARS

    def _is_whitespace(self, ch: str) -> bool:
        """
        Determines if a character is whitespace, including newlines.
        """
        return ch in self._WHITESPACE_CHARS
