"""Console Session: end-to-end through open_console with the real task runner.

Tests cover:
    - Commands dispatched through the helper reach backends on the runner thread
    - Leaving the block waits for in-flight work, and never sets the shutdown flag
"""

import io

from base_node_console.config import Settings
from base_node_console.main import open_console
from tests.fakes import make_context


def _settings() -> Settings:
    return Settings(_env_file=None, task_runner_shutdown_timeout_seconds=5)


def test_session_runs_detached_commands_to_completion():
    ctx = make_context()
    ctx.peer_directory.flood_peers.return_value = ["peer-a"]
    stream = io.StringIO()

    with open_console(ctx, out=stream, settings=_settings(), configure_logging=False) as console:
        console.handle_command("list-peers")
        console.handle_command("whoami")

    ctx.peer_directory.flood_peers.assert_awaited_once()
    assert "1 peer(s) known by this node" in stream.getvalue()
    assert "Public Key:" in stream.getvalue()
    assert ctx.shutdown_flag.load() is False


def test_session_quit_sets_flag_for_host():
    ctx = make_context()
    stream = io.StringIO()
    with open_console(ctx, out=stream, settings=_settings(), configure_logging=False) as console:
        console.handle_command("quit")
        assert console.shutdown_requested is True
    assert stream.getvalue() == "Shutting down...\n"
