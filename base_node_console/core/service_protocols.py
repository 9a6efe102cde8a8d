"""Boundary Protocols: contracts between the console core and node backends.

Invariants:
    - Core NEVER constructs a backend: every handle is injected
    - Backend calls are async; the console only awaits them inside detached tasks
    - Backend coroutines never block the event loop: all detached tasks share it
    - Handles are references: sharing one with a detached task shares the backend,
      never copies its state

Design Decisions:
    - Protocol over ABC: structural subtyping, backends need not inherit anything
    - Backends signal failure by raising (ServiceError preferred, any Exception tolerated)
"""

from collections.abc import Coroutine, Sequence
from typing import Any, Protocol

from base_node_console.core.domain_types import MicroTari, PublicKey
from base_node_console.schemas.node import BlockHeader, ChainMetadata
from base_node_console.schemas.wallet import Balance


class PeerDirectory(Protocol):
    """Known peers of this node."""
    async def flood_peers(self) -> Sequence[object]: ...


class ConnectionRegistry(Protocol):
    """Live peer connections held by this node."""
    async def get_active_connections(self) -> Sequence[object]: ...


class OutputService(Protocol):
    """Wallet output manager: balance queries."""
    async def get_balance(self) -> Balance: ...


class ChainQueryService(Protocol):
    """Local node interface: chain metadata and headers."""
    async def get_metadata(self) -> ChainMetadata: ...
    async def get_headers(self, heights: list[int]) -> Sequence[BlockHeader]: ...


class TransactionSendService(Protocol):
    """Wallet transaction service: outbound sends."""
    async def send_transaction(
        self,
        dest_pubkey: PublicKey,
        amount: MicroTari,
        fee_per_gram: MicroTari,
        message: str,
    ) -> object: ...


class TaskRunner(Protocol):
    """Runs detached units of work without blocking the submitter.

    spawn() returns nothing: no result or error of the unit reaches the caller.
    """
    def spawn(
        self, coro: Coroutine[Any, Any, None], name: str | None = None,
    ) -> None: ...


class HistoryHinter(Protocol):
    """Suggests the rest of a line from previous input."""
    def hint(self, line: str, pos: int) -> str | None: ...
