import sys
from typing import List, Optional, TextIO

from .collectors.version import CgroupVersion
from .formatting import format_bytes, format_number
from .models import CpuSnapshot, MemorySnapshot, ResourceSnapshot, RuntimeSnapshot

WIDTH = 80
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Reporter:
    """Renders snapshots as the plain-text report written to stdout."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str):
        self.stream.write(text)
        self.stream.flush()

    def print_header(self, version: CgroupVersion):
        self._write("\n".join([
            "=" * WIDTH,
            "Resource Monitor Started",
            "=" * WIDTH,
            f"Detected cgroup version: {version}",
            "=" * WIDTH,
            "",
            "",
        ]))

    def print_snapshot(self, snapshot: ResourceSnapshot):
        self._write(self.render(snapshot))

    def render(self, snapshot: ResourceSnapshot) -> str:
        lines = [
            f"[{snapshot.timestamp.strftime(TIMESTAMP_FORMAT)}]",
            "-" * WIDTH,
            "CPU Resources:",
        ]
        if snapshot.runtime is not None:
            lines += self._runtime_cpu_lines(snapshot.runtime)
        if snapshot.cpu is not None:
            lines += self._cpu_lines(snapshot.cpu)
        lines += ["", "Memory Resources:"]
        if snapshot.runtime is not None:
            lines += self._runtime_memory_lines(snapshot.runtime)
        if snapshot.memory is not None:
            lines += self._memory_lines(snapshot.memory)
        lines += ["", "=" * WIDTH, "", ""]
        return "\n".join(lines)

    @staticmethod
    def _runtime_cpu_lines(runtime: RuntimeSnapshot) -> List[str]:
        lines = []
        if runtime.cpu_count is not None:
            lines.append(f"  Available CPUs (host): {runtime.cpu_count}")
        if runtime.affinity_count is not None:
            lines.append(f"  Usable CPUs (affinity): {runtime.affinity_count}")
        return lines

    @staticmethod
    def _runtime_memory_lines(runtime: RuntimeSnapshot) -> List[str]:
        lines = []
        if runtime.rss is not None:
            lines.append(f"  Process RSS: {format_bytes(runtime.rss)}")
        if runtime.vms is not None:
            lines.append(f"  Process VMS: {format_bytes(runtime.vms)}")
        if runtime.threads is not None:
            lines.append(f"  Process Threads: {runtime.threads}")
        if runtime.gc_collections:
            lines.append(f"  Python GC collections: {'/'.join(map(str, runtime.gc_collections))}")
        if runtime.gc_objects:
            lines.append(f"  Python GC pending: {'/'.join(map(str, runtime.gc_objects))}")
        return lines

    @staticmethod
    def _limit_line(cpu: CpuSnapshot) -> Optional[str]:
        if cpu.unlimited:
            return "  CPU Limit: unlimited"
        if cpu.core_limit is not None:
            return f"  CPU Limit: {cpu.core_limit:.2f} cores"
        return None

    def _cpu_lines(self, cpu: CpuSnapshot) -> List[str]:
        lines = []
        if cpu.version is CgroupVersion.V1:
            if cpu.quota is not None:
                lines.append(f"  cgroup v1 cpu.cfs_quota_us: {cpu.quota}")
            if cpu.period is not None:
                lines.append(f"  cgroup v1 cpu.cfs_period_us: {cpu.period}")
            limit = self._limit_line(cpu)
            if limit:
                lines.append(limit)
            if cpu.usage_ns is not None:
                lines.append(f"  Total CPU usage (nanoseconds): {format_number(cpu.usage_ns)}")
        else:
            if cpu.raw_max is not None:
                lines.append(f"  cgroup v2 cpu.max: {cpu.raw_max}")
            limit = self._limit_line(cpu)
            if limit:
                lines.append(limit)
            if cpu.stat_lines is not None:
                lines.append("  cgroup v2 cpu.stat:")
                lines += [f"    {line}" for line in cpu.stat_lines]
        return lines

    @staticmethod
    def _memory_lines(memory: MemorySnapshot) -> List[str]:
        if memory.version is CgroupVersion.V1:
            limit_name, current_name, stat_name = "memory.limit_in_bytes", "memory.usage_in_bytes", "memory.stat"
        else:
            limit_name, current_name, stat_name = "memory.max", "memory.current", "memory.stat"
        prefix = f"  cgroup {str(memory.version).lower()}"

        lines = []
        if memory.unlimited:
            lines.append(f"{prefix} {limit_name}: unlimited")
        elif memory.limit is not None:
            lines.append(f"{prefix} {limit_name}: {format_bytes(memory.limit)}")
        if memory.current is not None:
            lines.append(f"{prefix} {current_name}: {format_bytes(memory.current)}")
        if memory.stats is not None:
            lines.append(f"{prefix} {stat_name} (selected):")
            lines += [f"    {stat.name}: {format_bytes(stat.value)}" for stat in memory.stats]
        return lines
