# rpn/lexer.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Lexical analyzer for RPN formula tokenization using SLY

"""Lexical analyzer for RPN formula strings.

Every character of an RPN formula is a token of its own. The lexer maps each
character onto its token type and rejects anything outside the alphabet,
whitespace included.

Supported Tokens:
- Constants: 0, 1
- Variables: single upper-case letters A..Z
- Unary operator: !
- Binary operators: &, |, ^, >, =
"""

from sly import Lexer
from .exceptions import InvalidCharacterError
from utils.logger import get_logger


class RPNLexer(Lexer):
    """SLY-based lexer for RPN formula tokenization.

    Attributes:
        tokens: Set of valid token types
    """

    tokens = {
        "CONST",
        "VAR",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "IMPL",
        "LEQ",
    }

    CONST = r"[01]"
    VAR = r"[A-Z]"
    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    XOR = r"\^"
    IMPL = r">"
    LEQ = r"="

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object whose value starts at the illegal character

        Raises:
            InvalidCharacterError: Always raised with character and position
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise InvalidCharacterError(illegal_char, error_pos)
