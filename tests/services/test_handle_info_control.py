"""Info + Control Handlers: help, whoami, toggle-mining, shutdown."""

import logging

import pytest

from base_node_console.core.commands import Command
from base_node_console.services.handle_control import ControlHandlers
from base_node_console.services.handle_info import HELP_TEXT, InfoHandlers
from tests.fakes import NODE_PUBLIC_KEY


def test_every_command_except_help_has_help_text():
    assert set(HELP_TEXT) == set(Command) - {Command.HELP}


def test_help_lists_vocabulary(ctx, out):
    InfoHandlers(ctx, out).print_help([])
    assert out.lines == [
        "Available commands are: ",
        "help, get-balance, send-tari, get-chain-metadata, list-peers, "
        "list-connections, list-headers, whoami, toggle-mining, quit, exit",
    ]


def test_help_unknown_topic_falls_back_to_listing(ctx, out):
    InfoHandlers(ctx, out).print_help(["frobnicate"])
    assert out.lines[0] == "Available commands are: "


@pytest.mark.parametrize("topic, expected", [
    ("get-balance", ["Gets your balance"]),
    ("quit", ["Exits the base node"]),
    ("exit", ["Exits the base node"]),
])
def test_help_for_topic(ctx, out, topic, expected):
    InfoHandlers(ctx, out).print_help([topic])
    assert out.lines == expected


def test_whoami_prints_identity(ctx, out):
    InfoHandlers(ctx, out).whoami([])
    assert out.lines[0] == f"Public Key: {NODE_PUBLIC_KEY}"
    assert out.lines[2] == "Public Address: /ip4/127.0.0.1/tcp/18141"


def test_toggle_mining_logs_new_state(ctx, out, caplog):
    with caplog.at_level(logging.DEBUG):
        ControlHandlers(ctx, out).toggle_mining([])
    assert ctx.mining_enabled.load() is True
    assert "Mining state is now switched to True" in caplog.text


def test_request_shutdown(ctx, out, caplog):
    with caplog.at_level(logging.INFO):
        ControlHandlers(ctx, out).request_shutdown([])
    assert ctx.shutdown_flag.load() is True
    assert out.lines == ["Shutting down..."]
    assert "Termination signal received from user" in caplog.text
