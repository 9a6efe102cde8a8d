"""Command Dispatch: explicit routing from a parsed command to its handler.

Invariants:
    - Every command->handler mapping is visible: no getattr magic, no auto-discovery
    - Unrecognized commands print a two-line hint and cause no other side effect
    - Exactly one handler runs per recognized line
    - handle_command returns as soon as the handler returns; handlers only
      validate and spawn, so backend latency never reaches the input thread
    - State is IDLE between calls

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: no convention-over-config)
    - Handlers split by concern: max 2 methods per class (ADR: no god objects)
    - quit and exit share one handler: they are two tokens for one action
"""

import logging
from collections.abc import Callable
from enum import Enum

from base_node_console.core.commands import Command, parse_line
from base_node_console.core.errors import ParseError
from base_node_console.core.node_context import NodeContext
from base_node_console.core.service_protocols import TaskRunner
from base_node_console.infrastructure.operator_output import OperatorOutput
from base_node_console.services.handle_chain import ChainHandlers
from base_node_console.services.handle_control import ControlHandlers
from base_node_console.services.handle_info import InfoHandlers
from base_node_console.services.handle_network import NetworkHandlers
from base_node_console.services.handle_wallet import WalletHandlers

logger = logging.getLogger(__name__)

Handler = Callable[[list[str]], None]


class DispatchState(str, Enum):
    IDLE = "idle"
    PARSING = "parsing"
    DISPATCHING = "dispatching"


class CommandDispatcher:
    """Routes operator lines -> handler. Explicit registration, no auto-discovery."""

    def __init__(
        self, ctx: NodeContext, runner: TaskRunner,
        out: OperatorOutput | None = None,
    ):
        self.ctx = ctx
        self.out = out or OperatorOutput()
        self.state = DispatchState.IDLE

        info = InfoHandlers(ctx, self.out)
        wallet = WalletHandlers(ctx, runner, self.out)
        chain = ChainHandlers(ctx, runner, self.out)
        network = NetworkHandlers(ctx, runner, self.out)
        control = ControlHandlers(ctx, self.out)

        # ADR: every mapping explicit: adding a command requires editing this dict
        self._handlers: dict[Command, Handler] = {
            Command.HELP: info.print_help,
            Command.WHOAMI: info.whoami,

            Command.GET_BALANCE: wallet.get_balance,
            Command.SEND_TARI: wallet.send_tari,

            Command.GET_CHAIN_METADATA: chain.get_chain_metadata,
            Command.LIST_HEADERS: chain.list_headers,

            Command.LIST_PEERS: network.list_peers,
            Command.LIST_CONNECTIONS: network.list_connections,

            Command.TOGGLE_MINING: control.toggle_mining,
            Command.QUIT: control.request_shutdown,
            Command.EXIT: control.request_shutdown,
        }

    def handle_command(self, line: str) -> Command | None:
        """Parse one operator line and run its handler.

        Returns the command that was dispatched, or None if the line did not
        start with a known command.
        """
        self.state = DispatchState.PARSING
        try:
            command, args = parse_line(line)
        except ParseError as e:
            logger.log(
                e.log_level, f"Rejected operator input: {e.message}",
                extra=e.log_extra(),
            )
            self.out.write(
                f"{line} is not a valid command, please enter a valid command",
                "Enter help or press tab for available commands",
            )
            self.state = DispatchState.IDLE
            return None

        self.state = DispatchState.DISPATCHING
        try:
            self._handlers[command](args)
        finally:
            self.state = DispatchState.IDLE
        return command
