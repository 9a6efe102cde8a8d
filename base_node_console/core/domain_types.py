"""Domain Types: value types that replace bare primitives in handler code.

Invariants:
    - MicroTari is a non-negative integer that fits in 64 bits
    - PublicKey is exactly 32 bytes
    - Both are immutable and hashable

Design Decisions:
    - Frozen dataclasses over NewType: construction validates, so a MicroTari
      or PublicKey in hand is always well-formed
    - Hex is the primary key encoding; emoji ids live in core/emoji.py
"""

from dataclasses import dataclass

from base_node_console.core.errors import PublicKeyError

U64_MAX = 2**64 - 1
PUBLIC_KEY_LENGTH = 32


@dataclass(frozen=True, order=True)
class MicroTari:
    """An amount of Tari in micro-units (µT)."""
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"MicroTari out of range: {self.value}")

    def __str__(self) -> str:
        return f"{self.value} µT"


@dataclass(frozen=True)
class PublicKey:
    """A node or wallet public key (32 raw bytes)."""
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != PUBLIC_KEY_LENGTH:
            raise PublicKeyError(
                f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(self.raw)}",
            )

    @classmethod
    def from_hex(cls, text: str) -> "PublicKey":
        try:
            raw = bytes.fromhex(text)
        except ValueError:
            raise PublicKeyError(f"'{text}' is not valid hex")
        return cls(raw)

    def to_hex(self) -> str:
        return self.raw.hex()

    def __str__(self) -> str:
        return self.to_hex()


# ─── Send defaults ───────────────────────────────────────────────

FEE_PER_GRAM = MicroTari(25)
SEND_TARI_MESSAGE = "coinbase reward from mining"
