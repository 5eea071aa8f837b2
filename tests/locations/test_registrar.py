"""Tests for the run-scoped name registrar."""
from __future__ import annotations

import threading

from locations.registrar import NameRegistrar


def test_register_first_use_returns_base_name() -> None:
    """Test that a new base name is returned unchanged."""
    registrar = NameRegistrar()
    assert registrar.register("widgets") == "widgets"


def test_register_repeated_names_get_counter_suffix() -> None:
    """Test the widgets, widgets_1, widgets_2 sequence."""
    registrar = NameRegistrar()
    names = [registrar.register("widgets") for _ in range(4)]
    assert names == ["widgets", "widgets_1", "widgets_2", "widgets_3"]


def test_register_tracks_base_names_independently() -> None:
    """Test that counters are kept per base name."""
    registrar = NameRegistrar()
    assert registrar.register("a") == "a"
    assert registrar.register("b") == "b"
    assert registrar.register("a") == "a_1"
    assert registrar.register("b") == "b_1"
    assert registrar.register("a") == "a_2"


def test_separate_registrars_do_not_share_state() -> None:
    """Test that each run gets a clean registry."""
    first = NameRegistrar()
    second = NameRegistrar()
    first.register("widgets")
    assert second.register("widgets") == "widgets"


def test_register_concurrently_hands_out_unique_names() -> None:
    """Test that concurrent registration never repeats a name."""
    registrar = NameRegistrar()
    results = []
    results_lock = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            name = registrar.register("widgets")
            with results_lock:
                results.append(name)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 400
    assert len(set(results)) == 400
    assert "widgets" in results
    assert "widgets_399" in results
