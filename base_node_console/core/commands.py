"""Command Vocabulary: the closed set of operator commands and their tokens.

Invariants:
    - Exactly 11 commands, each with exactly one canonical token
    - Tokens are lowercase and hyphen-separated
    - parse_command(render_command(c)) == c for every command
    - Vocabulary order is declaration order (completion relies on it)

Design Decisions:
    - Explicit token table over Enum.value / name mangling: the table is the
      contract, every mapping visible in one place (ADR: no convention-over-config)
    - Exact matching only: no abbreviations, no case folding
"""

from enum import Enum, auto

from base_node_console.core.errors import UnrecognizedCommandError

DEFAULT_TOKEN = "help"


class Command(Enum):
    """Commands understood by the base node console."""
    HELP = auto()
    GET_BALANCE = auto()
    SEND_TARI = auto()
    GET_CHAIN_METADATA = auto()
    LIST_PEERS = auto()
    LIST_CONNECTIONS = auto()
    LIST_HEADERS = auto()
    WHOAMI = auto()
    TOGGLE_MINING = auto()
    QUIT = auto()
    EXIT = auto()


# ADR: every mapping explicit: adding a command requires editing this dict
COMMAND_TOKENS: dict[Command, str] = {
    Command.HELP: "help",
    Command.GET_BALANCE: "get-balance",
    Command.SEND_TARI: "send-tari",
    Command.GET_CHAIN_METADATA: "get-chain-metadata",
    Command.LIST_PEERS: "list-peers",
    Command.LIST_CONNECTIONS: "list-connections",
    Command.LIST_HEADERS: "list-headers",
    Command.WHOAMI: "whoami",
    Command.TOGGLE_MINING: "toggle-mining",
    Command.QUIT: "quit",
    Command.EXIT: "exit",
}

_COMMANDS_BY_TOKEN: dict[str, Command] = {
    token: command for command, token in COMMAND_TOKENS.items()
}


def vocabulary_tokens() -> list[str]:
    """All canonical tokens, in declaration order."""
    return [COMMAND_TOKENS[command] for command in Command]


def render_command(command: Command) -> str:
    return COMMAND_TOKENS[command]


def parse_command(token: str) -> Command:
    """Resolve a single token to its command.

    Raises UnrecognizedCommandError when the token is not in the vocabulary.
    """
    command = _COMMANDS_BY_TOKEN.get(token)
    if command is None:
        raise UnrecognizedCommandError(token)
    return command


def parse_line(line: str) -> tuple[Command, list[str]]:
    """Split a raw line into (command, argument tokens).

    A line with no tokens is treated as "help".
    """
    tokens = line.split()
    if not tokens:
        return parse_command(DEFAULT_TOKEN), []
    return parse_command(tokens[0]), tokens[1:]
