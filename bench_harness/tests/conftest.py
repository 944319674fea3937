"""Test configuration for bench_harness."""

from __future__ import annotations

import importlib
from pathlib import Path
import sys

import pytest

from bench_harness import MemorySnapshot


def pytest_sessionstart():
    repo_root = Path(__file__).resolve().parents[1]
    src_path = repo_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def scripted_memory(monkeypatch):
    """Replace the memory collaborator with a scripted sequence of snapshots."""
    snapshots = [
        MemorySnapshot(heap_used=1_000, heap_total=50_000, rss=80_000),
        MemorySnapshot(heap_used=2_536, heap_total=48_976, rss=80_000 + 1024 * 1024),
    ]
    calls = []

    def fake_collect():
        snapshot = snapshots[len(calls) % len(snapshots)]
        calls.append(snapshot)
        return snapshot

    measure_module = importlib.import_module("bench_harness.measure")
    monkeypatch.setattr(measure_module, "collect_memory_usage", fake_collect)
    return calls
