"""Console Session: wires settings, logging, task runner and dispatcher.

Invariants:
    - Handles in the NodeContext are used as given; nothing here creates backends
    - The task runner lives exactly as long as the with-block
    - Leaving the block never touches the shutdown flag: the host decides when
      a session ends, this only releases the runner

Design Decisions:
    - Context manager over start/stop calls: mirrors an app lifespan, cleanup
      runs even when the host's input loop raises
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from base_node_console.config import Settings, get_settings
from base_node_console.core.node_context import NodeContext
from base_node_console.core.service_protocols import HistoryHinter
from base_node_console.infrastructure.observability import setup_logging
from base_node_console.infrastructure.operator_output import OperatorOutput
from base_node_console.infrastructure.task_runner import AsyncioTaskRunner
from base_node_console.services.command_dispatch import CommandDispatcher
from base_node_console.services.console_helper import ConsoleHelper

logger = logging.getLogger(__name__)


@contextmanager
def open_console(
    ctx: NodeContext,
    out: TextIO | None = None,
    settings: Settings | None = None,
    hinter: HistoryHinter | None = None,
    configure_logging: bool = True,
) -> Iterator[ConsoleHelper]:
    """Start a console session over the given node handles."""
    settings = settings or get_settings()
    log_handler = None
    if configure_logging:
        log_handler = setup_logging(settings.log_level, settings.log_format)

    runner = AsyncioTaskRunner(
        thread_name=settings.task_runner_thread_name,
        shutdown_timeout_seconds=settings.task_runner_shutdown_timeout_seconds,
    )
    runner.start()
    dispatcher = CommandDispatcher(ctx, runner, OperatorOutput(out))
    logger.info("Base node console started")
    try:
        yield ConsoleHelper(dispatcher, hinter)
    finally:
        runner.close()
        logger.info("Base node console closed")
        if log_handler is not None:
            logging.root.removeHandler(log_handler)
