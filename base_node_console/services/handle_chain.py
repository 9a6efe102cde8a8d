"""Chain Handlers: chain metadata and header listing (2 methods, detached).

Invariants:
    - list-headers makes two sequential backend calls: metadata, then headers
    - A metadata failure is reported and the listing continues from height 0
    - A header failure is reported and nothing else is printed
    - Requested heights are the first n of tip, tip-1, ..., 0

Design Decisions:
    - Keep the lenient fallbacks of the list-headers command (count 1, height 0):
      operators get *some* header rather than a second error message
"""

import logging

from base_node_console.core.arguments import header_heights, parse_header_count
from base_node_console.core.errors import error_code_of
from base_node_console.core.node_context import NodeContext
from base_node_console.core.service_protocols import ChainQueryService, TaskRunner
from base_node_console.infrastructure.operator_output import OperatorOutput

logger = logging.getLogger(__name__)


async def report_chain_metadata(
    service: ChainQueryService, out: OperatorOutput,
) -> None:
    try:
        metadata = await service.get_metadata()
    except Exception as e:
        out.write(f"Failed to retrieve chain metadata: {e!r}")
        logger.warning(
            f"Error communicating with base node: {e}",
            extra={
                "service": "chain_service", "command": "get-chain-metadata",
                "error_code": error_code_of(e),
            },
        )
        return
    out.write(f"Current meta data is: {metadata}")


async def _tip_height(service: ChainQueryService, out: OperatorOutput) -> int:
    """Height of the longest chain, or 0 when it cannot be determined."""
    try:
        metadata = await service.get_metadata()
    except Exception as e:
        out.write(f"Failed to retrieve chain height: {e!r}")
        logger.warning(
            f"Error communicating with base node: {e}",
            extra={
                "service": "chain_service", "command": "list-headers",
                "error_code": error_code_of(e),
            },
        )
        return 0
    return metadata.height_of_longest_chain or 0


async def report_headers(
    service: ChainQueryService, out: OperatorOutput, count: int,
) -> None:
    tip = await _tip_height(service, out)
    heights = header_heights(tip, count)
    try:
        headers = await service.get_headers(heights)
    except Exception as e:
        out.write(f"Failed to retrieve headers: {e!r}")
        logger.warning(
            f"Error communicating with base node: {e}",
            extra={
                "service": "chain_service", "command": "list-headers",
                "error_code": error_code_of(e),
            },
        )
        return
    out.write("\n\n".join(str(header) for header in headers))


class ChainHandlers:
    """get-chain-metadata, list-headers."""

    def __init__(self, ctx: NodeContext, runner: TaskRunner, out: OperatorOutput):
        self.ctx = ctx
        self.runner = runner
        self.out = out

    def get_chain_metadata(self, args: list[str]) -> None:
        service = self.ctx.chain_service
        self.runner.spawn(
            report_chain_metadata(service, self.out), name="get-chain-metadata",
        )

    def list_headers(self, args: list[str]) -> None:
        count = parse_header_count(args)
        service = self.ctx.chain_service
        self.runner.spawn(
            report_headers(service, self.out, count), name="list-headers",
        )
