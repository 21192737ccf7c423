"""Snapshot records built once per tick."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from .collectors.version import CgroupVersion


@dataclass(slots=True, frozen=True)
class StatField:
    """One whitelisted memory.stat entry."""

    name: str
    value: int  # Bytes


@dataclass(slots=True, frozen=True)
class CpuSnapshot:
    version: CgroupVersion
    quota: Optional[int] = None  # Microseconds, -1 on v1 means no quota
    period: Optional[int] = None  # Microseconds
    raw_max: Optional[str] = None  # v2 cpu.max content as read
    core_limit: Optional[float] = None
    unlimited: bool = False
    usage_ns: Optional[int] = None  # v1 only
    stat_lines: Optional[List[str]] = None  # v2 only, None when cpu.stat is missing


@dataclass(slots=True, frozen=True)
class MemorySnapshot:
    version: CgroupVersion
    limit: Optional[int] = None  # Bytes
    unlimited: bool = False
    current: Optional[int] = None  # Bytes
    stats: Optional[List[StatField]] = None  # None when the stat file is missing


@dataclass(slots=True, frozen=True)
class RuntimeSnapshot:
    """What the monitoring process itself sees and uses."""

    pid: int
    cpu_count: Optional[int] = None
    affinity_count: Optional[int] = None
    rss: Optional[int] = None  # Bytes
    vms: Optional[int] = None  # Bytes
    threads: Optional[int] = None
    gc_collections: Tuple[int, ...] = ()
    gc_objects: Tuple[int, ...] = ()


@dataclass(slots=True)
class ResourceSnapshot:
    timestamp: datetime
    version: CgroupVersion
    cpu: Optional[CpuSnapshot] = None
    memory: Optional[MemorySnapshot] = None
    runtime: Optional[RuntimeSnapshot] = None
