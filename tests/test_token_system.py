"""
Tests for the lexer and the unary-minus normalizer.
"""

import pytest
from core.token_system import (
    TokenType, Token, tokenize, normalize_unary_minus, is_unary_position
)


def _kinds(tokens):
    return [t.type for t in tokens]


def _texts(tokens):
    return [t.text for t in tokens]


class TestTokenize:
    """Test raw text -> token sequence."""

    def test_simple_arithmetic(self):
        tokens = tokenize("3 + 4.5*2")
        assert _kinds(tokens) == [
            TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER,
            TokenType.OPERATOR, TokenType.NUMBER,
        ]
        assert _texts(tokens) == ["3", "+", "4.5", "*", "2"]

    def test_parentheses_and_all_operators(self):
        tokens = tokenize("(1+2)-3*4/5%6")
        assert tokens[0] == Token(TokenType.LPAREN, "(")
        assert tokens[4] == Token(TokenType.RPAREN, ")")
        ops = [t.text for t in tokens if t.type == TokenType.OPERATOR]
        assert ops == ["+", "-", "*", "/", "%"]

    def test_whitespace_is_skipped(self):
        assert _texts(tokenize(" 1 \t+\n2\r ")) == ["1", "+", "2"]

    def test_empty_input_gives_empty_sequence(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_number_with_several_dots_passes_through(self):
        tokens = tokenize("1.2.3")
        assert tokens == [Token(TokenType.NUMBER, "1.2.3")]

    def test_leading_and_trailing_dot(self):
        assert _texts(tokenize(".5+1.")) == [".5", "+", "1."]

    @pytest.mark.parametrize("text", ["2^3", "abc", "1+x", "2**3 & 1", "1e5", "1,5", "²"])
    def test_unknown_character_fails(self, text):
        assert tokenize(text) is None

    def test_tokens_are_immutable(self):
        tok = tokenize("7")[0]
        with pytest.raises(AttributeError):
            tok.text = "8"


class TestNormalizeUnaryMinus:
    """Test prefix minus rewriting."""

    def test_leading_minus_becomes_zero_minus(self):
        tokens = normalize_unary_minus(tokenize("-5"))
        assert _texts(tokens) == ["0", "-", "5"]
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[1].unary

    def test_minus_after_open_paren(self):
        tokens = normalize_unary_minus(tokenize("(-5)"))
        assert _texts(tokens) == ["(", "0", "-", "5", ")"]

    def test_minus_after_operator(self):
        tokens = normalize_unary_minus(tokenize("3*-2"))
        assert _texts(tokens) == ["3", "*", "0", "-", "2"]
        assert tokens[3].unary

    def test_double_minus(self):
        tokens = normalize_unary_minus(tokenize("3--2"))
        assert _texts(tokens) == ["3", "-", "0", "-", "2"]
        assert not tokens[1].unary
        assert tokens[3].unary

    def test_binary_minus_unchanged(self):
        tokens = tokenize("4-1")
        assert normalize_unary_minus(tokens) == tokens

    def test_minus_after_close_paren_is_binary(self):
        tokens = normalize_unary_minus(tokenize("(1)-2"))
        assert _texts(tokens) == ["(", "1", ")", "-", "2"]

    def test_unary_position(self):
        assert is_unary_position(None)
        assert is_unary_position(Token(TokenType.OPERATOR, "+"))
        assert is_unary_position(Token(TokenType.LPAREN, "("))
        assert not is_unary_position(Token(TokenType.NUMBER, "1"))
        assert not is_unary_position(Token(TokenType.RPAREN, ")"))
