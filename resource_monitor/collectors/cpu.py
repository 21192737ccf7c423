import os

from .base import BaseCollector
from .version import CgroupVersion, LAYOUTS
from ..models import CpuSnapshot


class CpuCollector(BaseCollector):
    V1_NO_QUOTA = -1
    V2_NO_QUOTA = "max"

    def __init__(self, version: CgroupVersion, cgroup_dir: str = BaseCollector.CGROUP_DIR):
        self.version = version
        self.layout = LAYOUTS[version]
        self.cgroup_dir = cgroup_dir

    def _path(self, relative):
        return os.path.join(self.cgroup_dir, relative)

    def collect(self) -> CpuSnapshot:
        if self.version is CgroupVersion.V2:
            return self._collect_v2()
        return self._collect_v1()

    def _collect_v1(self) -> CpuSnapshot:
        quota_path, period_path = self.layout.cpu_limit
        quota = BaseCollector._read_int(self._path(quota_path))
        period = BaseCollector._read_int(self._path(period_path))

        core_limit = None
        unlimited = False
        if quota is not None and period is not None and quota > 0 and period > 0:
            core_limit = quota / period
        elif quota == CpuCollector.V1_NO_QUOTA:
            unlimited = True
        # any other quota <= 0 is malformed: no limit line at all

        return CpuSnapshot(
            version=self.version,
            quota=quota,
            period=period,
            core_limit=core_limit,
            unlimited=unlimited,
            usage_ns=BaseCollector._read_int(self._path(self.layout.cpu_usage)),
        )

    def _collect_v2(self) -> CpuSnapshot:
        raw_max = BaseCollector._probe_file(self._path(self.layout.cpu_limit[0]))

        quota = period = None
        core_limit = None
        unlimited = False
        if raw_max is not None:
            # Format: "<quota|max> <period>"
            parts = raw_max.split()
            if len(parts) == 2:
                period = BaseCollector._parse_int(parts[1])
                if parts[0] == CpuCollector.V2_NO_QUOTA:
                    unlimited = True
                else:
                    quota = BaseCollector._parse_int(parts[0])
                    if quota is not None and period is not None and period > 0:
                        core_limit = quota / period

        stat_lines = BaseCollector._get_file_lines(self._path(self.layout.cpu_usage))

        return CpuSnapshot(
            version=self.version,
            quota=quota,
            period=period,
            raw_max=raw_max,
            core_limit=core_limit,
            unlimited=unlimited,
            stat_lines=stat_lines,
        )
