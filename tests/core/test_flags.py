"""Atomic Flags: load/store/toggle semantics, including across threads."""

import threading

from base_node_console.core.flags import AtomicFlag


def test_store_and_load():
    flag = AtomicFlag()
    assert flag.load() is False
    flag.store(True)
    assert flag.load() is True
    assert bool(flag) is True


def test_toggle_twice_restores_value():
    for initial in (False, True):
        flag = AtomicFlag(initial)
        assert flag.toggle() is (not initial)
        assert flag.toggle() is initial


def test_concurrent_toggles_are_not_lost():
    flag = AtomicFlag(False)

    def toggle_many():
        for _ in range(1000):
            flag.toggle()

    threads = [threading.Thread(target=toggle_many) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    # 4000 toggles: an even count lands back on the start value
    assert flag.load() is False
