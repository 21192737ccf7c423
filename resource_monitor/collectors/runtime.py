import gc
import logging
import os

import psutil

from .base import BaseCollector
from ..models import RuntimeSnapshot

logger = logging.getLogger(__name__)


class RuntimeCollector(BaseCollector):
    """
    Reports the monitor's own process: how many CPUs it may run on and what
    the interpreter is holding in memory. Useful next to the cgroup figures
    to see whether the limits are what the process actually observes.
    """

    def __init__(self):
        self._process = psutil.Process()

    def collect(self) -> RuntimeSnapshot:
        rss = vms = threads = None
        try:
            with self._process.oneshot():
                mem_info = self._process.memory_info()
                rss, vms = mem_info.rss, mem_info.vms
                threads = self._process.num_threads()
        except (psutil.Error, OSError) as e:
            logger.debug(f"Failed to read process stats: {e}")

        return RuntimeSnapshot(
            pid=self._process.pid,
            cpu_count=psutil.cpu_count(logical=True) or os.cpu_count(),
            affinity_count=self._get_affinity_count(),
            rss=rss,
            vms=vms,
            threads=threads,
            gc_collections=tuple(gen["collections"] for gen in gc.get_stats()),
            gc_objects=tuple(gc.get_count()),
        )

    def _get_affinity_count(self):
        # cpu_affinity() is not available on macOS
        if not hasattr(self._process, "cpu_affinity"):
            return None
        try:
            return len(self._process.cpu_affinity())
        except (psutil.Error, OSError) as e:
            logger.debug(f"Failed to read CPU affinity: {e}")
            return None
