"""Wallet Schemas: Pydantic models for data returned by wallet-side handles."""

from pydantic import BaseModel, ConfigDict, Field


class Balance(BaseModel):
    """Wallet balance, all amounts in micro-Tari."""
    model_config = ConfigDict(frozen=True)

    available_balance: int = Field(ge=0)
    pending_incoming_balance: int = Field(default=0, ge=0)
    pending_outgoing_balance: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        return (
            f"Available balance: {self.available_balance} µT\n"
            f"Pending incoming balance: {self.pending_incoming_balance} µT\n"
            f"Pending outgoing balance: {self.pending_outgoing_balance} µT"
        )
