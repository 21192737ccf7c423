import logging
from datetime import datetime

from .base import BaseCollector
from .cpu import CpuCollector
from .mem import MemCollector
from .runtime import RuntimeCollector
from .version import detect
from ..models import ResourceSnapshot

logger = logging.getLogger(__name__)


class CollectorManager:
    def __init__(self, cgroup_dir: str = BaseCollector.CGROUP_DIR):
        """
        Detect the cgroup version once and set up the collectors for it.

        Args:
            cgroup_dir: cgroup mount point. Only tests point this elsewhere.
        """
        self.version = detect(cgroup_dir)
        logger.debug("Detected cgroup %s under %s", self.version, cgroup_dir)

        self.collectors = {
            "cpu": CpuCollector(self.version, cgroup_dir),
            "memory": MemCollector(self.version, cgroup_dir),
            "runtime": RuntimeCollector(),
        }

    def collect_metrics(self) -> ResourceSnapshot:
        """Builds a fresh snapshot from every collector."""
        sections = {}
        for key, collector in self.collectors.items():
            try:
                sections[key] = collector.collect()
            except Exception as e:
                logger.error(f"Error collecting {key} metrics: {e}")
                sections[key] = None

        return ResourceSnapshot(
            timestamp=datetime.now(),
            version=self.version,
            **sections,
        )
