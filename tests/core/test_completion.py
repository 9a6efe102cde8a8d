"""Completion Provider: tests for prefix candidates and readline adaptation.

Tests cover:
    - Every prefix of every token yields exactly the matching tokens, in order
    - Empty line yields the whole vocabulary
    - Case-sensitive matching; no candidates is not an error
    - readline protocol is restartable and finite
"""

from base_node_console.core.commands import vocabulary_tokens
from base_node_console.core.completion import CommandCompleter, complete_line


def test_empty_line_completes_to_full_vocabulary():
    assert complete_line("") == vocabulary_tokens()


def test_every_prefix_matches_declaration_order():
    tokens = vocabulary_tokens()
    for token in tokens:
        for end in range(len(token) + 1):
            prefix = token[:end]
            assert complete_line(prefix) == [t for t in tokens if t.startswith(prefix)]


def test_shared_prefix_keeps_declaration_order():
    assert complete_line("list-") == ["list-peers", "list-connections", "list-headers"]
    assert complete_line("get-") == ["get-balance", "get-chain-metadata"]


def test_completion_is_case_sensitive_and_never_raises():
    assert complete_line("LIST") == []
    assert complete_line("xyz") == []


def test_complete_passes_cursor_through():
    completer = CommandCompleter()
    assert completer.complete("qu", 2) == (2, ["quit"])


def test_update_replaces_line_with_candidate():
    completer = CommandCompleter()
    assert completer.update("tog", "toggle-mining") == ("toggle-mining", 13)


def test_readline_complete_enumerates_then_stops():
    completer = CommandCompleter()
    results = []
    state = 0
    while (match := completer.readline_complete("list-", state)) is not None:
        results.append(match)
        state += 1
    assert results == ["list-peers", "list-connections", "list-headers"]


def test_readline_complete_restarts_on_state_zero():
    completer = CommandCompleter()
    assert completer.readline_complete("get-", 0) == "get-balance"
    assert completer.readline_complete("q", 0) == "quit"
    assert completer.readline_complete("q", 1) is None
