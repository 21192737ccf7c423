"""Tests for the runtime (own process) collector."""

import os

import psutil

from resource_monitor.collectors.runtime import RuntimeCollector
from resource_monitor.models import RuntimeSnapshot


class TestRuntimeCollector:
    """Tests for RuntimeCollector."""

    def test_collects_own_process(self):
        snapshot = RuntimeCollector().collect()

        assert isinstance(snapshot, RuntimeSnapshot)
        assert snapshot.pid == os.getpid()
        assert snapshot.cpu_count >= 1
        assert snapshot.rss > 0
        assert snapshot.vms >= snapshot.rss
        assert snapshot.threads >= 1

    def test_gc_counters_per_generation(self):
        snapshot = RuntimeCollector().collect()
        assert snapshot.gc_collections
        assert all(isinstance(n, int) for n in snapshot.gc_collections)
        assert all(isinstance(n, int) for n in snapshot.gc_objects)

    def test_memory_failure_leaves_fields_absent(self, monkeypatch):
        collector = RuntimeCollector()

        def denied(*args, **kwargs):
            raise psutil.AccessDenied(pid=os.getpid())

        monkeypatch.setattr(psutil.Process, "memory_info", denied)
        snapshot = collector.collect()

        assert snapshot.rss is None
        assert snapshot.vms is None
        assert snapshot.threads is None
        assert snapshot.cpu_count >= 1

    def test_affinity_failure_is_absent(self, monkeypatch):
        collector = RuntimeCollector()

        def denied(*args, **kwargs):
            raise psutil.AccessDenied(pid=os.getpid())

        monkeypatch.setattr(psutil.Process, "cpu_affinity", denied, raising=False)
        assert collector.collect().affinity_count is None
