"""Tests for the zigzag (rail fence) transposition cipher."""

import pytest

from filemorph.core.config import Settings
from filemorph.core.exceptions import InvalidArgumentError, MissingArgumentError
from filemorph.models.schemas import Operation
from filemorph.services.engines.transposition import zigzag
from filemorph.services.engines.transposition.zigzag import ZigzagEngine


class TestZigzagFunctions:
    """Test suite for the pure zigzag encode/decode functions."""

    @pytest.fixture
    def plaintext(self):
        return "WEAREDISCOVEREDFLEEATONCE"

    def test_encode_known_example(self, plaintext):
        """Test the textbook three-rail example."""
        assert zigzag.encode(plaintext, 3) == "WECRLTEERDSOEEFEAOCAIVDEN"

    def test_decode_known_example(self, plaintext):
        assert zigzag.decode("WECRLTEERDSOEEFEAOCAIVDEN", 3) == plaintext

    def test_encode_decode_roundtrip(self, plaintext):
        """Test that encode followed by decode returns original."""
        for rails in range(2, len(plaintext)):
            ciphertext = zigzag.encode(plaintext, rails)
            assert len(ciphertext) == len(plaintext)
            assert zigzag.decode(ciphertext, rails) == plaintext

    def test_two_rails(self):
        assert zigzag.encode("HELLO", 2) == "HLOEL"
        assert zigzag.decode("HLOEL", 2) == "HELLO"

    def test_preserves_case_and_punctuation(self):
        text = "Hello, World!"
        ciphertext = zigzag.encode(text, 4)
        assert sorted(ciphertext) == sorted(text)
        assert zigzag.decode(ciphertext, 4) == text

    @pytest.mark.parametrize("rails", [1, 0, -2])
    def test_too_few_rails_is_identity(self, plaintext, rails):
        assert zigzag.encode(plaintext, rails) == plaintext
        assert zigzag.decode(plaintext, rails) == plaintext

    def test_rails_at_or_above_length_is_identity(self):
        assert zigzag.encode("HELLO", 5) == "HELLO"
        assert zigzag.decode("HELLO", 5) == "HELLO"
        assert zigzag.encode("HELLO", 50) == "HELLO"

    def test_empty_text(self):
        assert zigzag.encode("", 3) == ""

    def test_non_integer_rails_rejected(self):
        with pytest.raises(InvalidArgumentError):
            zigzag.encode("HELLO", "3")
        with pytest.raises(InvalidArgumentError):
            zigzag.decode("HELLO", 2.5)
        with pytest.raises(InvalidArgumentError):
            zigzag.encode("HELLO", True)

    def test_missing_rails(self):
        with pytest.raises(MissingArgumentError):
            zigzag.encode("HELLO", None)

    def test_non_string_text_rejected(self):
        with pytest.raises(InvalidArgumentError):
            zigzag.encode(12345, 2)


class TestZigzagEngine:
    """Test suite for the zigzag engine adapter."""

    @pytest.fixture
    def engine(self):
        return ZigzagEngine()

    def test_accepts_numeric_string_key(self, engine):
        assert engine.encode("HELLO", "2") == "HLOEL"

    def test_default_key_comes_from_settings(self, engine):
        assert engine.default_key(Settings(default_rails=4)) == 4

    def test_explain(self, engine):
        explanation = engine.explain(Operation.ENCODE, 3)
        assert "3 rails" in explanation

    def test_explain_single_rail(self, engine):
        explanation = engine.explain(Operation.ENCODE, 1)
        assert "unchanged" in explanation

    def test_explain_more_rails_than_characters(self, engine):
        """Short text is returned unchanged and the explanation says so."""
        assert engine.encode("HI", 3) == "HI"

        explanation = engine.explain(Operation.ENCODE, 3, "HI")
        assert "unchanged" in explanation
        assert "zigzag pattern" not in explanation

    def test_explain_with_long_enough_text(self, engine):
        explanation = engine.explain(Operation.DECODE, 3, "WECRLTEERDSOEEFEAOCAIVDEN")
        assert "zigzag pattern across 3 rows" in explanation
