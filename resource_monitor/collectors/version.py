import enum
import os
from dataclasses import dataclass
from typing import Dict, Tuple

from .base import BaseCollector


class CgroupVersion(enum.Enum):
    V1 = 1
    V2 = 2

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class CgroupLayout:
    """
    Where a cgroup version keeps its accounting files, relative to the
    cgroup mount point, and which memory.stat keys are worth showing.
    """
    version: CgroupVersion
    cpu_limit: Tuple[str, ...]
    cpu_usage: str
    memory_limit: str
    memory_current: str
    memory_stat: str
    memory_stat_keys: Tuple[str, ...]


V2_MARKER = "cgroup.controllers"

LAYOUTS: Dict[CgroupVersion, CgroupLayout] = {
    CgroupVersion.V1: CgroupLayout(
        version=CgroupVersion.V1,
        # quota and period live in separate files
        cpu_limit=(os.path.join("cpu", "cpu.cfs_quota_us"), os.path.join("cpu", "cpu.cfs_period_us")),
        cpu_usage=os.path.join("cpu,cpuacct", "cpuacct.usage"),
        memory_limit=os.path.join("memory", "memory.limit_in_bytes"),
        memory_current=os.path.join("memory", "memory.usage_in_bytes"),
        memory_stat=os.path.join("memory", "memory.stat"),
        memory_stat_keys=("cache", "rss", "mapped_file", "inactive_anon"),
    ),
    CgroupVersion.V2: CgroupLayout(
        version=CgroupVersion.V2,
        cpu_limit=("cpu.max",),
        cpu_usage="cpu.stat",
        memory_limit="memory.max",
        memory_current="memory.current",
        memory_stat="memory.stat",
        memory_stat_keys=("anon", "file", "kernel_stack", "slab"),
    ),
}


def detect(cgroup_dir: str = BaseCollector.CGROUP_DIR) -> CgroupVersion:
    """
    Decides which cgroup API the kernel exposes.

    The unified hierarchy always publishes cgroup.controllers at its root, so
    its presence means v2. Anything else, including an unreadable or missing
    mount, is reported as v1.
    """
    if BaseCollector._exists(os.path.join(cgroup_dir, V2_MARKER)):
        return CgroupVersion.V2
    return CgroupVersion.V1
