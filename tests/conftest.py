"""Fake cgroup mount points for the collector tests."""

import pytest


def write_tree(root, files):
    """Create `files` ({relative path: content}) under `root`."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


V1_FILES = {
    "cpu/cpu.cfs_quota_us": "150000\n",
    "cpu/cpu.cfs_period_us": "100000\n",
    "cpu,cpuacct/cpuacct.usage": "123456789012\n",
    "memory/memory.limit_in_bytes": "536870912\n",
    "memory/memory.usage_in_bytes": "104857600\n",
    "memory/memory.stat": (
        "cache 4096\n"
        "rss 2097152\n"
        "rss_huge 0\n"
        "mapped_file 1024\n"
        "swap 0\n"
        "inactive_anon 8192\n"
        "total_cache 4096\n"
    ),
}

V2_FILES = {
    "cgroup.controllers": "cpuset cpu io memory pids\n",
    "cpu.max": "50000 100000\n",
    "cpu.stat": "usage_usec 1000\nuser_usec 600\n\nsystem_usec 400\n",
    "memory.max": "1073741824\n",
    "memory.current": "2048\n",
    "memory.stat": (
        "anon 1048576\n"
        "file 2048\n"
        "kernel 4096\n"
        "kernel_stack 16384\n"
        "pagetables 4096\n"
        "slab 3072\n"
        "slab_reclaimable 1024\n"
    ),
}


@pytest.fixture
def v1_root(tmp_path):
    return write_tree(tmp_path, V1_FILES)


@pytest.fixture
def v2_root(tmp_path):
    return write_tree(tmp_path, V2_FILES)


@pytest.fixture
def cgroup_tree(tmp_path):
    """Build a cgroup tree from a {relative path: content} mapping."""
    def _make(files):
        return write_tree(tmp_path, files)
    return _make
