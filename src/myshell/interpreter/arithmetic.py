"""Arithmetic evaluation for $(( ... )) expansion.

Tokenizes an expression and evaluates it with a recursive descent parser.
Operators, highest precedence first:

- ``^``          exponent (right-associative)
- unary ``-``/``+``
- ``*`` ``/`` ``%``  (left-to-right)
- ``+`` ``-``       (left-to-right)

Values are exact rationals, so integer results stay exact well past 2^32 and
decimal results carry no binary floating point noise.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum, auto
from fractions import Fraction
from typing import Optional

DECIMAL_PLACES = 6
"""Digits kept after the decimal point when formatting a result."""

MAX_EXPONENT = 4096
"""Largest exponent magnitude accepted by ``^``."""

MAX_RESULT_BITS = 1 << 16
"""Largest estimated size, in bits, of the numerator or denominator of a power."""


class ArithmeticSyntaxError(ValueError):
    """Raised when an expression cannot be tokenized or parsed."""


class TokenType(Enum):
    NUMBER = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    CARET = auto()
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[Fraction]
    pos: int


_OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "^": TokenType.CARET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def tokenize(expression: str) -> list[Token]:
    """Split an expression into tokens, ending with an EOF token."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(expression):
        c = expression[pos]
        if c.isspace():
            pos += 1
            continue
        if c in _OPERATORS:
            tokens.append(Token(_OPERATORS[c], None, pos))
            pos += 1
            continue
        match = _NUMBER_RE.match(expression, pos)
        if match is None:
            raise ArithmeticSyntaxError(f"invalid token {c!r} at position {pos}")
        # Fraction parses decimal strings exactly: Fraction("0.1") == 1/10
        tokens.append(Token(TokenType.NUMBER, Fraction(match.group()), pos))
        pos = match.end()
    tokens.append(Token(TokenType.EOF, None, pos))
    return tokens


class Parser:
    """Recursive descent evaluator over a token list."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token:
        """Look at the current token."""
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Advance and return the current token."""
        tok = self.tokens[self.pos]
        if tok.type != TokenType.EOF:
            self.pos += 1
        return tok

    def match(self, *types: TokenType) -> Optional[Token]:
        """If the current token matches any type, advance and return it."""
        if self.peek().type in types:
            return self.advance()
        return None

    def parse(self) -> Fraction:
        """Evaluate the whole expression."""
        if self.peek().type == TokenType.EOF:
            raise ArithmeticSyntaxError("empty expression")
        value = self.parse_sum()
        if self.peek().type != TokenType.EOF:
            raise ArithmeticSyntaxError(f"unexpected token at position {self.peek().pos}")
        return value

    def parse_sum(self) -> Fraction:
        """Parse + and - (left-associative)."""
        left = self.parse_product()
        while True:
            op = self.match(TokenType.PLUS, TokenType.MINUS)
            if op is None:
                return left
            right = self.parse_product()
            left = left + right if op.type == TokenType.PLUS else left - right

    def parse_product(self) -> Fraction:
        """Parse *, / and % (left-associative)."""
        left = self.parse_unary()
        while True:
            op = self.match(TokenType.STAR, TokenType.SLASH, TokenType.PERCENT)
            if op is None:
                return left
            right = self.parse_unary()
            if op.type == TokenType.STAR:
                left = left * right
            elif op.type == TokenType.SLASH:
                left = left / right
            else:
                left = _remainder(left, right)

    def parse_unary(self) -> Fraction:
        """Parse unary minus and plus."""
        if self.match(TokenType.MINUS):
            return -self.parse_unary()
        if self.match(TokenType.PLUS):
            return self.parse_unary()
        return self.parse_power()

    def parse_power(self) -> Fraction:
        """Parse ^ (right-associative, binds tighter than unary minus)."""
        base = self.parse_primary()
        if self.match(TokenType.CARET):
            return _power(base, self.parse_unary())
        return base

    def parse_primary(self) -> Fraction:
        """Parse a number or a parenthesized expression."""
        tok = self.advance()
        if tok.type == TokenType.NUMBER:
            assert tok.value is not None
            return tok.value
        if tok.type == TokenType.LPAREN:
            value = self.parse_sum()
            if not self.match(TokenType.RPAREN):
                raise ArithmeticSyntaxError(f"expected ')' at position {self.peek().pos}")
            return value
        raise ArithmeticSyntaxError(f"expected operand at position {tok.pos}")


def _remainder(left: Fraction, right: Fraction) -> Fraction:
    """Remainder with the sign of the dividend (truncating division)."""
    if right == 0:
        raise ZeroDivisionError("modulo by zero")
    quotient = math.trunc(left / right)
    return left - right * quotient


def _power(base: Fraction, exponent: Fraction) -> Fraction:
    if exponent.denominator == 1:
        if abs(exponent) > MAX_EXPONENT:
            raise OverflowError(f"exponent too large: {exponent}")
        bits = max(base.numerator.bit_length(), base.denominator.bit_length())
        size = abs(exponent.numerator) * bits
        if size > MAX_RESULT_BITS:
            raise OverflowError(f"result of power too large: about {size} bits")
        return base ** int(exponent)
    # Fractional exponents have no exact rational result in general
    return Fraction(math.pow(float(base), float(exponent)))


def evaluate(expression: str) -> Fraction:
    """Evaluate an arithmetic expression.

    Raises:
        ArithmeticSyntaxError: The expression is malformed.
        ValueError: A fractional power of a negative base.
        ZeroDivisionError: Division or modulo by zero.
        OverflowError: The result cannot be represented.
    """
    return Parser(tokenize(expression)).parse()


def format_number(value: Fraction) -> str:
    """Format a value as a bare integer or a minimal decimal.

    The value is rounded half-even to DECIMAL_PLACES digits and trailing
    zeros are stripped.
    """
    rounded = round(value, DECIMAL_PLACES)
    if rounded.denominator == 1:
        return str(rounded.numerator)
    sign = "-" if rounded < 0 else ""
    scale = 10 ** DECIMAL_PLACES
    whole, fraction = divmod(int(abs(rounded) * scale), scale)
    digits = str(fraction).rjust(DECIMAL_PLACES, "0").rstrip("0")
    return f"{sign}{whole}.{digits}"


def try_evaluate(expression: str) -> Optional[str]:
    """Evaluate and format an expression, or return None if it fails."""
    try:
        return format_number(evaluate(expression))
    except (ValueError, ZeroDivisionError, OverflowError):
        return None
