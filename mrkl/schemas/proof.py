"""
Schemas - Proof Wire Formats
File: proof.py

Purpose: Serialization of proof elements and inclusion proofs for
byte digests. Element order is preserved exactly; both the side tag
and the raw digest bytes of each element are carried.

Formats:
- Text element:  "l<hex>" / "r<hex>" (one CLI argument per element)
- JSON element:  {"Left": "<hex>"} / {"Right": "<hex>"}
- ProofDocument: a whole InclusionProof plus the strategy it was built with
"""

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mrkl.crypto.hashing import from_hex, to_hex
from mrkl.merkle.merkle_proofs import InclusionProof
from mrkl.merkle.proof import Left, ProofElem, Side, make_elem

from .errors import HashFormatException, ProofFormatException


TEXT_PREFIXES: dict[str, Side] = {"l": Side.LEFT, "r": Side.RIGHT}
JSON_TAGS: dict[str, Side] = {"Left": Side.LEFT, "Right": Side.RIGHT}


# =============================================================================
# Text Form
# =============================================================================

def format_proof_elem(elem: ProofElem[bytes]) -> str:
    """Encode an element as 'l<hex>' or 'r<hex>'."""
    prefix = "l" if isinstance(elem, Left) else "r"
    return prefix + to_hex(elem.digest)


def parse_proof_elem(text: str, position: int | None = None) -> ProofElem[bytes]:
    """
    Decode an element from 'l<hex>' or 'r<hex>'.

    Raises:
        ProofFormatException: If the prefix is missing or the hex is invalid
    """
    side = TEXT_PREFIXES.get(text[:1])
    if side is None:
        raise ProofFormatException(
            "string must be prefixed with either 'l' or 'r'",
            position=position,
            details={"value": text},
        )
    return make_elem(side, _decode_digest(text[1:], position))


def format_proof(proof: Sequence[ProofElem[bytes]]) -> list[str]:
    return [format_proof_elem(elem) for elem in proof]


def parse_proof(items: Sequence[str]) -> list[ProofElem[bytes]]:
    return [parse_proof_elem(item, position=i) for i, item in enumerate(items)]


# =============================================================================
# JSON Form (externally tagged)
# =============================================================================

def proof_to_json(proof: Sequence[ProofElem[bytes]]) -> list[dict[str, str]]:
    """Encode elements as [{"Left": hex} | {"Right": hex}, ...]."""
    return [
        {"Left" if isinstance(elem, Left) else "Right": to_hex(elem.digest)}
        for elem in proof
    ]


def proof_from_json(data: Any) -> list[ProofElem[bytes]]:
    """
    Decode a list of externally tagged elements.

    Raises:
        ProofFormatException: If data is not a list of single-key
            {"Left": hex} / {"Right": hex} objects
    """
    if not isinstance(data, list):
        raise ProofFormatException(
            f"proof must be a JSON list, got {type(data).__name__}"
        )

    proof: list[ProofElem[bytes]] = []
    for position, item in enumerate(data):
        if not isinstance(item, dict) or len(item) != 1:
            raise ProofFormatException(
                "proof element must be an object with exactly one of 'Left' or 'Right'",
                position=position,
            )
        tag, value = next(iter(item.items()))
        side = JSON_TAGS.get(tag)
        if side is None or not isinstance(value, str):
            raise ProofFormatException(
                f"unknown proof element {tag!r}",
                position=position,
            )
        proof.append(make_elem(side, _decode_digest(value, position)))
    return proof


def _decode_digest(value: str, position: int | None) -> bytes:
    try:
        return from_hex(value)
    except HashFormatException as e:
        raise ProofFormatException(
            f"invalid digest in proof element: {e.message}",
            position=position,
        ) from e


# =============================================================================
# Proof Document
# =============================================================================

class ProofDocument(BaseModel):
    """
    Serialized inclusion proof for byte digests.

    The root is informational. Verifiers recompute it from leaf and
    elements and compare with a root they trust.
    """

    model_config = ConfigDict(extra="forbid")

    algorithm: str = Field(..., description="Digest algorithm name")
    leaf_mode: str = Field(..., description="Leaf finalization mode")
    index: int = Field(..., ge=0, description="0-based leaf index")
    leaf: str = Field(..., description="Raw leaf digest (hex)")
    root: str | None = Field(default=None, description="Root the proof was built against (hex)")
    elements: list[dict[str, str]] = Field(
        default_factory=list,
        description="Proof elements bottom-to-top, externally tagged",
    )

    @field_validator("elements")
    @classmethod
    def check_elements(cls, value: list[dict[str, str]]) -> list[dict[str, str]]:
        proof_from_json(value)
        return value

    @classmethod
    def from_proof(
        cls,
        proof: InclusionProof[bytes],
        algorithm: str,
        leaf_mode: str,
    ) -> "ProofDocument":
        return cls(
            algorithm=algorithm,
            leaf_mode=leaf_mode,
            index=proof.index,
            leaf=to_hex(proof.leaf),
            root=to_hex(proof.root) if proof.root is not None else None,
            elements=proof_to_json(proof.elements),
        )

    def to_proof(self) -> InclusionProof[bytes]:
        return InclusionProof(
            leaf=from_hex(self.leaf),
            index=self.index,
            elements=proof_from_json(self.elements),
            root=from_hex(self.root) if self.root is not None else None,
        )


__all__ = [
    "format_proof_elem",
    "parse_proof_elem",
    "format_proof",
    "parse_proof",
    "proof_to_json",
    "proof_from_json",
    "ProofDocument",
]
