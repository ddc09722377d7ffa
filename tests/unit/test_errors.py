"""
Error Taxonomy Unit Tests
Tests for mrkl/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from mrkl.schemas.errors import (
    EmptyInputException,
    ErrorCodes,
    HashFormatException,
    IndexOutOfRangeException,
    MrklError,
    MrklException,
    ProofFormatException,
    UnsupportedAlgorithmException,
)


class TestExceptionCodes:
    """Every exception carries its stable code and is never retryable."""

    @pytest.mark.parametrize(
        "exc,code",
        [
            (EmptyInputException(), ErrorCodes.EMPTY_INPUT),
            (IndexOutOfRangeException(5, 5), ErrorCodes.INDEX_OUT_OF_RANGE),
            (HashFormatException("bad"), ErrorCodes.HASH_FORMAT_ERROR),
            (ProofFormatException("bad"), ErrorCodes.PROOF_FORMAT_ERROR),
            (UnsupportedAlgorithmException("x", ["a"]), ErrorCodes.UNSUPPORTED_ALGORITHM),
        ],
    )
    def test_code(self, exc, code):
        assert isinstance(exc, MrklException)
        assert exc.code == code
        assert exc.retryable is False

    def test_builtin_bases(self):
        assert isinstance(EmptyInputException(), ValueError)
        assert isinstance(IndexOutOfRangeException(0, 0), IndexError)
        assert isinstance(HashFormatException("x"), ValueError)


class TestExceptionDetails:
    """Structured details travel with the exception."""

    def test_index_out_of_range(self):
        exc = IndexOutOfRangeException(7, 5)

        assert exc.details == {"index": 7, "leaves_len": 5}
        assert "7" in exc.message
        assert "5 leaves" in exc.message

    def test_hash_format_value(self):
        exc = HashFormatException("bad hex", value="zz")
        assert exc.details == {"value": "zz"}

    def test_proof_format_position(self):
        exc = ProofFormatException("bad element", position=3)
        assert exc.details == {"position": 3}

    def test_unsupported_message(self):
        exc = UnsupportedAlgorithmException("md5", ["blake2", "sha2"])
        assert exc.message == "algorithm must be one of: blake2, sha2 (got 'md5')"


class TestErrorModel:
    """Tests for MrklError conversion."""

    def test_to_error_model(self):
        error = EmptyInputException().to_error_model()

        assert isinstance(error, MrklError)
        assert error.code == ErrorCodes.EMPTY_INPUT
        assert error.retryable is False

    def test_error_model_carries_details(self):
        original = IndexOutOfRangeException(3, 2)
        error = original.to_error_model()

        assert error.code == original.code
        assert error.message == original.message
        assert error.details == original.details

    def test_model_forbids_extra(self):
        with pytest.raises(ValidationError):
            MrklError(code="X", message="m", extra="nope")

    def test_repr(self):
        assert repr(ProofFormatException("bad")) == (
            "ProofFormatException(code='PROOF_FORMAT_ERROR', message='bad')"
        )
