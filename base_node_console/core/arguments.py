"""Argument Validation: pure parsing of handler argument tokens.

Invariants:
    - No IO, no backend access: every function here runs before any backend call
    - Invalid input raises ArgumentError carrying the operator-facing hint lines
    - list-headers never fails: bad counts fall back to 1, a bad height to 0

Design Decisions:
    - Validators return domain types (MicroTari, PublicKey), not strings:
      handlers never re-parse what was already checked
    - Destination keys try hex first, emoji id second (hex is what operators paste)
"""

import re

from base_node_console.core.commands import DEFAULT_TOKEN, Command, parse_command
from base_node_console.core.domain_types import U64_MAX, MicroTari, PublicKey
from base_node_console.core.emoji import EmojiId
from base_node_console.core.errors import (
    ArgumentError,
    EmojiIdError,
    PublicKeyError,
    UnrecognizedCommandError,
)

SEND_TARI_USAGE = "send-tari [amount of tari to send] [public key to send to]"
DEFAULT_HEADER_COUNT = 1

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U64_DIGITS = len(str(U64_MAX))


def resolve_help_topic(args: list[str]) -> Command:
    """Command to print help for. Unknown topics fall back to HELP."""
    topic = args[0] if args else DEFAULT_TOKEN
    try:
        return parse_command(topic)
    except UnrecognizedCommandError:
        return Command.HELP


def _parse_u64(text: str) -> int | None:
    """Unsigned 64-bit value of a decimal token, or None if it is not one."""
    if not _UNSIGNED.fullmatch(text):
        return None
    # Digit count checked first: int() refuses very long digit strings
    digits = text.lstrip("+").lstrip("0")
    if len(digits) > _U64_DIGITS:
        return None
    value = int(digits or "0")
    return value if value <= U64_MAX else None


def parse_amount(text: str) -> MicroTari:
    value = _parse_u64(text)
    if value is None:
        raise ArgumentError(
            f"'{text[:32]}' is not a valid amount",
            "amount",
            ["please enter a valid amount of tari"],
        )
    return MicroTari(value)


def parse_destination(text: str) -> PublicKey:
    """Decode a destination key from hex, falling back to an emoji id."""
    try:
        return PublicKey.from_hex(text)
    except PublicKeyError:
        pass
    try:
        return EmojiId.str_to_pubkey(text)
    except EmojiIdError:
        raise ArgumentError(
            f"'{text}' is neither a hex public key nor an emoji id",
            "destination",
            ["please enter a valid destination pub_key"],
        )


def parse_send_args(args: list[str]) -> tuple[MicroTari, PublicKey]:
    """Validate `send-tari <amount> <dest>`.

    args excludes the command token, so a well-formed line has exactly
    three tokens in total: command, amount, destination.
    """
    if len(args) != 2:
        raise ArgumentError(
            f"send-tari takes 2 arguments, got {len(args)}",
            "args",
            [
                "Command entered incorrectly, please use the following format: ",
                SEND_TARI_USAGE,
            ],
        )
    return parse_amount(args[0]), parse_destination(args[1])


def parse_header_count(args: list[str]) -> int:
    """Requested header count; absent, non-numeric, zero or over-u64 counts become 1."""
    count = _parse_u64(args[0]) if args else None
    return count if count else DEFAULT_HEADER_COUNT


def header_heights(tip_height: int, count: int) -> list[int]:
    """First `count` heights of tip, tip-1, ..., 0."""
    tip_height = max(tip_height, 0)
    stop = max(tip_height - count, -1)
    return list(range(tip_height, stop, -1))
