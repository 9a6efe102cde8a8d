"""Node Context: the capability bundle a console session is built from.

Invariants:
    - Built once per session by the host; the console never creates handles
    - Identity is immutable; flags are the only mutable shared state
    - The bundle itself is frozen: handles are never swapped mid-session
"""

from dataclasses import dataclass

from base_node_console.core.flags import AtomicFlag
from base_node_console.core.service_protocols import (
    ChainQueryService,
    ConnectionRegistry,
    OutputService,
    PeerDirectory,
    TransactionSendService,
)
from base_node_console.schemas.node import NodeIdentity


@dataclass(frozen=True)
class NodeContext:
    """Handles supplied by the hosting node for one console session."""
    node_identity: NodeIdentity
    peer_directory: PeerDirectory
    connection_registry: ConnectionRegistry
    shutdown_flag: AtomicFlag
    mining_enabled: AtomicFlag
    output_service: OutputService
    chain_service: ChainQueryService
    transaction_service: TransactionSendService
