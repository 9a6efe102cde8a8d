"""Test fakes: node handles, task runner and operator output.

Invariants:
    - Backends are AsyncMocks: tests assert on calls, never on real IO
    - RecordingTaskRunner never runs anything on spawn(); tests drain it
      explicitly, which makes "the handler returned before the work ran" observable
"""

import io
from unittest.mock import AsyncMock

from base_node_console.core.flags import AtomicFlag
from base_node_console.core.node_context import NodeContext
from base_node_console.infrastructure.operator_output import OperatorOutput
from base_node_console.schemas.node import ChainMetadata, NodeIdentity
from base_node_console.schemas.wallet import Balance

NODE_PUBLIC_KEY = "a" * 64


class RecordingTaskRunner:
    """TaskRunner that records spawned units until drain() awaits them."""

    def __init__(self):
        self.spawned: list[tuple[str | None, object]] = []

    @property
    def names(self) -> list[str | None]:
        return [name for name, _ in self.spawned]

    def spawn(self, coro, name=None) -> None:
        self.spawned.append((name, coro))

    async def drain(self) -> None:
        spawned, self.spawned = self.spawned, []
        for _, coro in spawned:
            await coro

    def close(self) -> None:
        for _, coro in self.spawned:
            coro.close()
        self.spawned = []


class CapturedOutput(OperatorOutput):
    """OperatorOutput over a StringIO, with helpers for assertions."""

    def __init__(self):
        super().__init__(io.StringIO())

    @property
    def text(self) -> str:
        return self.stream.getvalue()

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


def make_context(**overrides) -> NodeContext:
    output_service = AsyncMock()
    output_service.get_balance.return_value = Balance(available_balance=1000)
    chain_service = AsyncMock()
    chain_service.get_metadata.return_value = ChainMetadata(
        height_of_longest_chain=10, best_block="00ff",
    )
    chain_service.get_headers.return_value = []
    peer_directory = AsyncMock()
    peer_directory.flood_peers.return_value = []
    connection_registry = AsyncMock()
    connection_registry.get_active_connections.return_value = []

    fields = {
        "node_identity": NodeIdentity(
            public_key=NODE_PUBLIC_KEY,
            node_id="0123456789abcdef0123",
            public_address="/ip4/127.0.0.1/tcp/18141",
        ),
        "peer_directory": peer_directory,
        "connection_registry": connection_registry,
        "shutdown_flag": AtomicFlag(False),
        "mining_enabled": AtomicFlag(False),
        "output_service": output_service,
        "chain_service": chain_service,
        "transaction_service": AsyncMock(),
    }
    fields.update(overrides)
    return NodeContext(**fields)
