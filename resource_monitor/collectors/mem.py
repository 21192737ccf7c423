import os
from typing import List, Optional, Sequence

from .base import BaseCollector
from .version import CgroupVersion, LAYOUTS
from ..models import MemorySnapshot, StatField


class MemCollector(BaseCollector):
    # v1 has no "max" keyword; an unlimited group reports a huge page-aligned
    # number (usually 2^63 - 1 rounded down to the page size). Anything above
    # this threshold is treated as no limit.
    V1_UNLIMITED_THRESHOLD = 1 << 60
    V2_NO_LIMIT = "max"

    def __init__(self, version: CgroupVersion, cgroup_dir: str = BaseCollector.CGROUP_DIR):
        self.version = version
        self.layout = LAYOUTS[version]
        self.cgroup_dir = cgroup_dir

    def _path(self, relative):
        return os.path.join(self.cgroup_dir, relative)

    def collect(self) -> MemorySnapshot:
        if self.version is CgroupVersion.V2:
            limit, unlimited = self._get_limit_v2()
        else:
            limit, unlimited = self._get_limit_v1()

        return MemorySnapshot(
            version=self.version,
            limit=limit,
            unlimited=unlimited,
            current=BaseCollector._read_int(self._path(self.layout.memory_current)),
            stats=self._get_stats(self.layout.memory_stat_keys),
        )

    def _get_limit_v1(self):
        limit = BaseCollector._read_int(self._path(self.layout.memory_limit))
        if limit is not None and limit > self.V1_UNLIMITED_THRESHOLD:
            return None, True
        return limit, False

    def _get_limit_v2(self):
        content = BaseCollector._probe_file(self._path(self.layout.memory_limit))
        if content == MemCollector.V2_NO_LIMIT:
            return None, True
        return BaseCollector._parse_unsigned(content), False

    def _get_stats(self, keys: Sequence[str]) -> Optional[List[StatField]]:
        """Picks the whitelisted `key value` lines out of memory.stat, in file order."""
        lines = BaseCollector._get_file_lines(self._path(self.layout.memory_stat))
        if lines is None:
            return None

        stats = []
        for line in lines:
            parts = line.split()
            if len(parts) != 2 or parts[0] not in keys:
                continue
            value = BaseCollector._parse_unsigned(parts[1])
            if value is None:
                continue
            stats.append(StatField(name=parts[0], value=value))
        return stats
