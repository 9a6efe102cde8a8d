"""Emoji Id: an emoji encoding of a 32-byte public key.

Invariants:
    - Alphabet has exactly 256 symbols, one per byte value
    - An emoji id is 33 symbols: 32 key bytes followed by one checksum symbol
    - The checksum is Luhn mod 256 over the key symbols; any single-symbol
      substitution is rejected

Design Decisions:
    - Alphabet is the contiguous pictograph range U+1F400..U+1F4FF: every
      code point is assigned, single code point wide, and has no modifiers
    - This table is local to the console and is not the network's emoji table:
      ids printed by other Tari software will not decode here
"""

from base_node_console.core.domain_types import PUBLIC_KEY_LENGTH, PublicKey
from base_node_console.core.errors import EmojiIdError

_ALPHABET_START = 0x1F400
EMOJI: tuple[str, ...] = tuple(chr(_ALPHABET_START + i) for i in range(256))
_INDEX: dict[str, int] = {symbol: i for i, symbol in enumerate(EMOJI)}
DICT_SIZE = len(EMOJI)
EMOJI_ID_LENGTH = PUBLIC_KEY_LENGTH + 1


def luhn_checksum(indices: list[int], modulus: int = DICT_SIZE) -> int:
    """Luhn mod N check symbol for a sequence of alphabet indices."""
    factor = 2
    total = 0
    for index in reversed(indices):
        addend = factor * index
        factor = 1 if factor == 2 else 2
        total += addend // modulus + addend % modulus
    return (modulus - total % modulus) % modulus


def is_valid_checksum(indices: list[int], modulus: int = DICT_SIZE) -> bool:
    factor = 1
    total = 0
    for index in reversed(indices):
        addend = factor * index
        factor = 1 if factor == 2 else 2
        total += addend // modulus + addend % modulus
    return total % modulus == 0


class EmojiId:
    """Emoji rendering of a public key, with a trailing checksum symbol."""

    def __init__(self, text: str):
        self._indices = self._decode(text)
        self._text = text

    @staticmethod
    def _decode(text: str) -> list[int]:
        if len(text) != EMOJI_ID_LENGTH:
            raise EmojiIdError(
                f"Emoji id must be {EMOJI_ID_LENGTH} symbols, got {len(text)}",
            )
        try:
            indices = [_INDEX[symbol] for symbol in text]
        except KeyError as e:
            raise EmojiIdError(f"Symbol {e.args[0]!r} is not in the emoji alphabet")
        if not is_valid_checksum(indices):
            raise EmojiIdError("Emoji id checksum does not match")
        return indices

    @classmethod
    def from_public_key(cls, public_key: PublicKey) -> "EmojiId":
        indices = list(public_key.raw)
        indices.append(luhn_checksum(indices))
        return cls("".join(EMOJI[i] for i in indices))

    @classmethod
    def str_to_pubkey(cls, text: str) -> PublicKey:
        return cls(text).to_public_key()

    def to_public_key(self) -> PublicKey:
        return PublicKey(bytes(self._indices[:PUBLIC_KEY_LENGTH]))

    def __str__(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmojiId) and other._text == self._text

    def __hash__(self) -> int:
        return hash(self._text)
