"""Schemas: rendering and validation of backend data shapes."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from base_node_console.schemas.node import BlockHeader, ChainMetadata, NodeIdentity
from base_node_console.schemas.wallet import Balance


def test_node_identity_renders_three_lines():
    identity = NodeIdentity(public_key="ab", node_id="cd", public_address="/ip4/1.2.3.4")
    assert str(identity).splitlines() == [
        "Public Key: ab", "Node ID: cd", "Public Address: /ip4/1.2.3.4",
    ]


def test_chain_metadata_unknown_height():
    assert "Height of longest chain: unknown" in str(ChainMetadata())


def test_block_header_rendering():
    header = BlockHeader(
        height=3, hash="h3", prev_hash="h2",
        timestamp=datetime(2020, 5, 1, tzinfo=timezone.utc),
    )
    assert str(header).splitlines()[0] == "Height: 3"


def test_balance_rejects_negative_amounts():
    with pytest.raises(ValidationError):
        Balance(available_balance=-1)


def test_models_are_frozen():
    metadata = ChainMetadata(height_of_longest_chain=1)
    with pytest.raises(ValidationError):
        metadata.height_of_longest_chain = 2
