"""Wallet Handlers: balance and send (2 methods, both detach backend work).

Invariants:
    - send-tari validates every argument before anything is spawned:
      malformed input prints a hint and never reaches the transaction service
    - Backend failures print a short line and log a warning; never raised
    - The backend handle is captured before spawning, so the detached task
      never reads handler state after the handler returns

Design Decisions:
    - Detached work lives in module-level coroutines taking the handle as a
      parameter: what the task may touch is visible in its signature
"""

import logging

from base_node_console.core.arguments import parse_send_args
from base_node_console.core.domain_types import (
    FEE_PER_GRAM,
    SEND_TARI_MESSAGE,
    MicroTari,
    PublicKey,
)
from base_node_console.core.errors import ArgumentError, error_code_of
from base_node_console.core.node_context import NodeContext
from base_node_console.core.service_protocols import (
    OutputService,
    TaskRunner,
    TransactionSendService,
)
from base_node_console.infrastructure.operator_output import OperatorOutput

logger = logging.getLogger(__name__)


async def report_balance(service: OutputService, out: OperatorOutput) -> None:
    try:
        balance = await service.get_balance()
    except Exception as e:
        out.write("Something went wrong")
        logger.warning(
            f"Error communicating with wallet: {e}",
            extra={
                "service": "output_service", "command": "get-balance",
                "error_code": error_code_of(e),
            },
        )
        return
    out.write(f"Balances:\n{balance}")


async def submit_send(
    service: TransactionSendService,
    out: OperatorOutput,
    dest_pubkey: PublicKey,
    amount: MicroTari,
) -> None:
    try:
        await service.send_transaction(
            dest_pubkey, amount, FEE_PER_GRAM, SEND_TARI_MESSAGE,
        )
    except Exception as e:
        out.write("Something went wrong sending funds", repr(e))
        logger.warning(
            f"Error communicating with wallet: {e}",
            extra={
                "service": "transaction_service", "command": "send-tari",
                "error_code": error_code_of(e),
            },
        )
        return
    out.write(f"Send {amount} Tari to {dest_pubkey}")


class WalletHandlers:
    """get-balance, send-tari."""

    def __init__(self, ctx: NodeContext, runner: TaskRunner, out: OperatorOutput):
        self.ctx = ctx
        self.runner = runner
        self.out = out

    def get_balance(self, args: list[str]) -> None:
        service = self.ctx.output_service
        self.runner.spawn(report_balance(service, self.out), name="get-balance")

    def send_tari(self, args: list[str]) -> None:
        try:
            amount, dest_pubkey = parse_send_args(args)
        except ArgumentError as e:
            logger.log(
                e.log_level, f"Rejected send-tari arguments: {e.message}",
                extra={**e.log_extra(), "command": "send-tari"},
            )
            self.out.write(*e.hint_lines)
            return
        service = self.ctx.transaction_service
        self.runner.spawn(
            submit_send(service, self.out, dest_pubkey, amount),
            name="send-tari",
        )
