"""Network Handlers: peer and connection listings."""

import logging

import pytest

from base_node_console.services.handle_network import NetworkHandlers


@pytest.mark.asyncio
async def test_list_peers_prints_peers_and_count(ctx, runner, out):
    ctx.peer_directory.flood_peers.return_value = ["peer-a", "peer-b"]
    NetworkHandlers(ctx, runner, out).list_peers([])
    await runner.drain()
    assert out.lines == ["peer-a", "peer-b", "2 peer(s) known by this node"]


@pytest.mark.asyncio
async def test_list_peers_failure_logs_only(ctx, runner, out, caplog):
    ctx.peer_directory.flood_peers.side_effect = RuntimeError("corrupt db")
    NetworkHandlers(ctx, runner, out).list_peers([])
    with caplog.at_level(logging.ERROR):
        await runner.drain()
    assert out.text == ""
    assert "Could not read peers: corrupt db" in caplog.text
    assert caplog.records[-1].error_code == "RuntimeError"


@pytest.mark.asyncio
async def test_list_connections_empty(ctx, runner, out):
    NetworkHandlers(ctx, runner, out).list_connections([])
    await runner.drain()
    assert out.lines == ["No active peer connections."]


@pytest.mark.asyncio
async def test_list_connections_prints_connections_and_count(ctx, runner, out):
    ctx.connection_registry.get_active_connections.return_value = ["conn-1"]
    NetworkHandlers(ctx, runner, out).list_connections([])
    await runner.drain()
    assert out.lines == ["conn-1", "1 active connection(s)"]


@pytest.mark.asyncio
async def test_list_connections_failure_logs_only(ctx, runner, out, caplog):
    ctx.connection_registry.get_active_connections.side_effect = RuntimeError("gone")
    NetworkHandlers(ctx, runner, out).list_connections([])
    with caplog.at_level(logging.ERROR):
        await runner.drain()
    assert out.text == ""
    assert "Could not list connections: gone" in caplog.text
