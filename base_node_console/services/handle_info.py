"""Info Handlers: help and identity (2 methods, both synchronous).

Invariants:
    - Neither handler touches a backend or the task runner
    - help never fails: unknown topics fall back to the command listing
"""

from base_node_console.core.arguments import SEND_TARI_USAGE, resolve_help_topic
from base_node_console.core.commands import Command, vocabulary_tokens
from base_node_console.core.node_context import NodeContext
from base_node_console.infrastructure.operator_output import OperatorOutput

HELP_TEXT: dict[Command, list[str]] = {
    Command.GET_BALANCE: ["Gets your balance"],
    Command.SEND_TARI: [
        "Sends an amount of Tari to a address call this command via:",
        SEND_TARI_USAGE,
    ],
    Command.GET_CHAIN_METADATA: ["Gets your base node chain meta data"],
    Command.LIST_PEERS: ["Lists the peers that this node knows about"],
    Command.LIST_CONNECTIONS: [
        "Lists the peer connections currently held by this node",
    ],
    Command.LIST_HEADERS: [
        "List the last headers up to a maximum of 10 of the current chain",
    ],
    Command.TOGGLE_MINING: [
        "Enable or disable the miner on this node, calling this command will toggle the state",
    ],
    Command.WHOAMI: [
        "Display identity information about this node, including: public key, "
        "node ID and the public address",
    ],
    Command.QUIT: ["Exits the base node"],
    Command.EXIT: ["Exits the base node"],
}


class InfoHandlers:
    """help, whoami."""

    def __init__(self, ctx: NodeContext, out: OperatorOutput):
        self.ctx = ctx
        self.out = out

    def print_help(self, args: list[str]) -> None:
        topic = resolve_help_topic(args)
        if topic is Command.HELP:
            self.out.write(
                "Available commands are: ", ", ".join(vocabulary_tokens()),
            )
            return
        self.out.write(*HELP_TEXT[topic])

    def whoami(self, args: list[str]) -> None:
        self.out.write(str(self.ctx.node_identity))
