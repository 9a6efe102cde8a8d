"""Root conftest: shared fixtures built from tests/fakes.py."""

import os

import pytest

from base_node_console.config import get_settings
from base_node_console.core.node_context import NodeContext
from tests.fakes import CapturedOutput, RecordingTaskRunner, make_context

# Ensure a developer's shell settings don't leak into tests
for _key in list(os.environ):
    if _key.upper().startswith("CONSOLE_"):
        del os.environ[_key]


@pytest.fixture
def ctx() -> NodeContext:
    return make_context()


@pytest.fixture
def runner():
    r = RecordingTaskRunner()
    yield r
    # Units left undrained are closed so they never warn as un-awaited
    r.close()


@pytest.fixture
def out() -> CapturedOutput:
    return CapturedOutput()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
