# tests/rpn_tests/test_lexer_tokens.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Test suite for RPN lexer tokenization and error handling

"""Test suite for RPN lexer functionality.

Verifies that every character of the alphabet maps onto its token type and
that any other character, whitespace included, is rejected.
"""

import pytest
from rpn.lexer import RPNLexer
from rpn import InvalidCharacterError, ParseError
from utils.logger import get_logger


class TestRPNLexer:
    """Test cases for RPN lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = RPNLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        self.logger.debug(f"Tokenizing: '{text}'")
        return [token.type for token in self.lexer.tokenize(text)]

    VALID_TOKENIZATION_CASES = [
        ("0", ["CONST"]),
        ("1", ["CONST"]),
        ("A", ["VAR"]),
        ("Z", ["VAR"]),
        ("!", ["NOT"]),
        ("&|^>=", ["AND", "OR", "XOR", "IMPL", "LEQ"]),
        ("AB&", ["VAR", "VAR", "AND"]),
        ("1011||=", ["CONST", "CONST", "CONST", "CONST", "OR", "OR", "LEQ"]),
        ("A!!", ["VAR", "NOT", "NOT"]),
        ("", []),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_token_values_are_characters(self):
        values = [token.value for token in self.lexer.tokenize("AB>C!|")]
        assert values == ["A", "B", ">", "C", "!", "|"]

    INVALID_CHARACTER_CASES = [
        ("x", "x", 0),
        ("1x|", "x", 1),
        ("A B&", " ", 1),
        ("AB&\n", "\n", 3),
        ("2", "2", 0),
        ("(A)", "(", 0),
        ("AB~", "~", 2),
    ]

    @pytest.mark.parametrize("input_text, bad_char, position", INVALID_CHARACTER_CASES)
    def test_invalid_characters(self, input_text, bad_char, position):
        with pytest.raises(InvalidCharacterError) as exc_info:
            list(self.lexer.tokenize(input_text))

        assert exc_info.value.character == bad_char
        assert exc_info.value.position == position
        assert isinstance(exc_info.value, ParseError)
