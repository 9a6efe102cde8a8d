"""Control Handlers: mining toggle and shutdown (2 methods, synchronous).

Invariants:
    - Only the shared flags are touched; no backend, no task runner
    - Shutdown only sets the flag: stopping the node is the host's job
"""

import logging

from base_node_console.core.node_context import NodeContext
from base_node_console.infrastructure.operator_output import OperatorOutput

logger = logging.getLogger(__name__)


class ControlHandlers:
    """toggle-mining, quit / exit."""

    def __init__(self, ctx: NodeContext, out: OperatorOutput):
        self.ctx = ctx
        self.out = out

    def toggle_mining(self, args: list[str]) -> None:
        new_state = self.ctx.mining_enabled.toggle()
        logger.debug(
            f"Mining state is now switched to {new_state}",
            extra={"command": "toggle-mining"},
        )

    def request_shutdown(self, args: list[str]) -> None:
        self.out.write("Shutting down...")
        logger.info(
            "Termination signal received from user. Shutting node down.",
            extra={"command": "quit"},
        )
        self.ctx.shutdown_flag.store(True)
