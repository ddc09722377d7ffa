"""
Proof Codec Unit Tests
Tests for mrkl/schemas/proof.py

Tests:
- text element form 'l<hex>' / 'r<hex>'
- JSON element form {"Left": hex} / {"Right": hex}
- ProofDocument conversion and validation
"""
import json

import pytest
from pydantic import ValidationError

from fixtures import VECTOR_PROOFS
from mrkl.crypto.hashing import from_hex
from mrkl.merkle.merkle_proofs import MerkleProver
from mrkl.merkle.proof import Left, Right
from mrkl.schemas.errors import ProofFormatException
from mrkl.schemas.proof import (
    ProofDocument,
    format_proof,
    format_proof_elem,
    parse_proof,
    parse_proof_elem,
    proof_from_json,
    proof_to_json,
)


class TestTextForm:
    """Tests for the CLI element form."""

    def test_format(self):
        assert format_proof_elem(Left(b"\xab\xcd")) == "labcd"
        assert format_proof_elem(Right(b"\x01")) == "r01"

    def test_parse(self):
        assert parse_proof_elem("labcd") == Left(b"\xab\xcd")
        assert parse_proof_elem("r01") == Right(b"\x01")

    def test_parse_prefixed_hex(self):
        assert parse_proof_elem("l0xabcd") == Left(b"\xab\xcd")

    def test_missing_prefix_raises(self):
        with pytest.raises(ProofFormatException, match="prefixed with either 'l' or 'r'"):
            parse_proof_elem("abcd")

    def test_uppercase_prefix_rejected(self):
        with pytest.raises(ProofFormatException):
            parse_proof_elem("Labcd")

    def test_empty_string_raises(self):
        with pytest.raises(ProofFormatException):
            parse_proof_elem("")

    def test_bad_hex_reports_position(self):
        with pytest.raises(ProofFormatException) as exc_info:
            parse_proof(["l00", "rzz"])

        assert exc_info.value.details["position"] == 1

    def test_order_preserved(self):
        proof = [Right(b"\x01"), Left(b"\x02"), Right(b"\x03")]
        assert format_proof(proof) == ["r01", "l02", "r03"]
        assert parse_proof(format_proof(proof)) == proof


class TestJsonForm:
    """Tests for the externally tagged JSON form."""

    def test_encode(self):
        assert proof_to_json([Left(b"\xab"), Right(b"\xcd")]) == [
            {"Left": "ab"},
            {"Right": "cd"},
        ]

    def test_decode_vectors(self):
        proof = proof_from_json(VECTOR_PROOFS[1])

        assert isinstance(proof[0], Left)
        assert isinstance(proof[1], Right)
        assert proof[1].digest == from_hex(VECTOR_PROOFS[1][1]["Right"])

    def test_survives_json_text(self):
        data = json.loads(json.dumps(VECTOR_PROOFS[0]))
        assert proof_to_json(proof_from_json(data)) == VECTOR_PROOFS[0]

    def test_not_a_list_raises(self):
        with pytest.raises(ProofFormatException, match="list"):
            proof_from_json({"Left": "ab"})

    def test_unknown_tag_raises(self):
        with pytest.raises(ProofFormatException, match="unknown proof element"):
            proof_from_json([{"Middle": "ab"}])

    def test_two_keys_raises(self):
        with pytest.raises(ProofFormatException, match="exactly one"):
            proof_from_json([{"Left": "ab", "Right": "cd"}])

    def test_non_string_digest_raises(self):
        with pytest.raises(ProofFormatException):
            proof_from_json([{"Left": [1, 2, 3]}])

    def test_bad_hex_raises(self):
        with pytest.raises(ProofFormatException, match="invalid digest"):
            proof_from_json([{"Right": "abc"}])


class TestProofDocument:
    """Tests for ProofDocument."""

    def test_from_proof(self, blake2_strategy, vector_leaves):
        proof = MerkleProver.prove(vector_leaves, 0, blake2_strategy)
        document = ProofDocument.from_proof(proof, "blake2", "rehash")

        assert document.index == 0
        assert document.algorithm == "blake2"
        assert document.leaf_mode == "rehash"
        assert document.elements == VECTOR_PROOFS[0]
        assert from_hex(document.leaf) == vector_leaves[0]

    def test_to_proof(self, blake2_strategy, vector_leaves):
        proof = MerkleProver.prove(vector_leaves, 2, blake2_strategy)
        document = ProofDocument.from_proof(proof, "blake2", "rehash")

        restored = ProofDocument.model_validate_json(document.model_dump_json()).to_proof()

        assert restored == proof

    def test_root_optional(self):
        document = ProofDocument(
            algorithm="blake2", leaf_mode="rehash", index=0, leaf="ab", elements=[]
        )
        assert document.root is None
        assert document.to_proof().root is None

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            ProofDocument(algorithm="blake2", leaf_mode="rehash", index=-1, leaf="ab")

    def test_malformed_elements_rejected(self):
        with pytest.raises(ValidationError):
            ProofDocument(
                algorithm="blake2",
                leaf_mode="rehash",
                index=0,
                leaf="ab",
                elements=[{"Up": "ab"}],
            )

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            ProofDocument(
                algorithm="blake2", leaf_mode="rehash", index=0, leaf="ab", extra=1
            )
