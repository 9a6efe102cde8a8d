"""Node Schemas: Pydantic models for data returned by node-side handles.

Invariants:
    - Models are immutable once built (frozen)
    - height_of_longest_chain may be None for a node that has not synced

Design Decisions:
    - __str__ renders the operator-facing text: handlers print models directly
      and never format fields themselves
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NodeIdentity(BaseModel):
    """Identity descriptor of the running node."""
    model_config = ConfigDict(frozen=True)

    public_key: str
    node_id: str
    public_address: str

    def __str__(self) -> str:
        return (
            f"Public Key: {self.public_key}\n"
            f"Node ID: {self.node_id}\n"
            f"Public Address: {self.public_address}"
        )


class ChainMetadata(BaseModel):
    """Tip information for the node's best chain."""
    model_config = ConfigDict(frozen=True)

    height_of_longest_chain: int | None = None
    best_block: str | None = None
    pruning_horizon: int = 0

    def __str__(self) -> str:
        height = (
            "unknown" if self.height_of_longest_chain is None
            else str(self.height_of_longest_chain)
        )
        best_block = self.best_block or "none"
        return (
            f"Height of longest chain: {height}, "
            f"Best block: {best_block}, "
            f"Pruning horizon: {self.pruning_horizon}"
        )


class BlockHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    height: int
    hash: str
    prev_hash: str
    timestamp: datetime

    def __str__(self) -> str:
        return (
            f"Height: {self.height}\n"
            f"Hash: {self.hash}\n"
            f"Previous hash: {self.prev_hash}\n"
            f"Timestamp: {self.timestamp.isoformat()}"
        )
