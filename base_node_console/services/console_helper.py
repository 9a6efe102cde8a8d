"""Console Helper: the object a line editor talks to.

Bundles the three hooks an interactive prompt needs: tab completion over the
command vocabulary, history hints from an injected hinter, and dispatch of
finished lines. The line-reading loop itself belongs to the host:

    with open_console(ctx) as console:
        readline.set_completer(console.completer.readline_complete)
        readline.parse_and_bind("tab: complete")
        while not ctx.shutdown_flag.load():
            console.handle_command(input(">> "))
"""

from base_node_console.core.commands import Command
from base_node_console.core.completion import CommandCompleter
from base_node_console.core.service_protocols import HistoryHinter
from base_node_console.services.command_dispatch import CommandDispatcher


class ConsoleHelper:

    def __init__(
        self, dispatcher: CommandDispatcher,
        hinter: HistoryHinter | None = None,
    ):
        self.dispatcher = dispatcher
        self.completer = CommandCompleter()
        self._hinter = hinter

    def complete(self, line: str, pos: int) -> tuple[int, list[str]]:
        return self.completer.complete(line, pos)

    def hint(self, line: str, pos: int) -> str | None:
        if self._hinter is None:
            return None
        return self._hinter.hint(line, pos)

    def handle_command(self, line: str) -> Command | None:
        return self.dispatcher.handle_command(line)

    @property
    def shutdown_requested(self) -> bool:
        return self.dispatcher.ctx.shutdown_flag.load()
