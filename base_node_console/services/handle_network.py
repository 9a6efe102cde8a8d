"""Network Handlers: peers and connections (2 methods, detached).

Invariants:
    - Failures are logged at error level only; the operator sees no output
    - Listings end with a count line
"""

import logging

from base_node_console.core.errors import error_code_of
from base_node_console.core.node_context import NodeContext
from base_node_console.core.service_protocols import (
    ConnectionRegistry,
    PeerDirectory,
    TaskRunner,
)
from base_node_console.infrastructure.operator_output import OperatorOutput

logger = logging.getLogger(__name__)


async def report_peers(directory: PeerDirectory, out: OperatorOutput) -> None:
    try:
        peers = await directory.flood_peers()
    except Exception as e:
        logger.error(
            f"Could not read peers: {e}",
            extra={
                "service": "peer_directory", "command": "list-peers",
                "error_code": error_code_of(e),
            },
        )
        return
    out.write(
        "\n".join(str(peer) for peer in peers),
        f"{len(peers)} peer(s) known by this node",
    )


async def report_connections(
    registry: ConnectionRegistry, out: OperatorOutput,
) -> None:
    try:
        connections = await registry.get_active_connections()
    except Exception as e:
        logger.error(
            f"Could not list connections: {e}",
            extra={
                "service": "connection_registry", "command": "list-connections",
                "error_code": error_code_of(e),
            },
        )
        return
    if not connections:
        out.write("No active peer connections.")
        return
    out.write(
        "\n".join(str(conn) for conn in connections),
        f"{len(connections)} active connection(s)",
    )


class NetworkHandlers:
    """list-peers, list-connections."""

    def __init__(self, ctx: NodeContext, runner: TaskRunner, out: OperatorOutput):
        self.ctx = ctx
        self.runner = runner
        self.out = out

    def list_peers(self, args: list[str]) -> None:
        directory = self.ctx.peer_directory
        self.runner.spawn(report_peers(directory, self.out), name="list-peers")

    def list_connections(self, args: list[str]) -> None:
        registry = self.ctx.connection_registry
        self.runner.spawn(
            report_connections(registry, self.out), name="list-connections",
        )
