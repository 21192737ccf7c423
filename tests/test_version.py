"""Tests for cgroup version detection and layouts."""

from resource_monitor.collectors.version import CgroupVersion, LAYOUTS, detect


class TestDetect:
    """Tests for detect()."""

    def test_marker_means_v2(self, cgroup_tree):
        root = cgroup_tree({"cgroup.controllers": "cpu memory\n"})
        assert detect(str(root)) is CgroupVersion.V2

    def test_marker_wins_over_v1_files(self, cgroup_tree):
        """Test v2 is reported even when v1 controller files exist too."""
        root = cgroup_tree({
            "cgroup.controllers": "",
            "cpu/cpu.cfs_quota_us": "-1\n",
            "memory/memory.limit_in_bytes": "9223372036854771712\n",
        })
        assert detect(str(root)) is CgroupVersion.V2

    def test_no_marker_means_v1(self, v1_root):
        assert detect(str(v1_root)) is CgroupVersion.V1

    def test_missing_mount_means_v1(self, tmp_path):
        assert detect(str(tmp_path / "does-not-exist")) is CgroupVersion.V1

    def test_version_str(self):
        assert str(CgroupVersion.V1) == "V1"
        assert str(CgroupVersion.V2) == "V2"


class TestLayouts:
    """Tests for the per-version file tables."""

    def test_every_version_has_a_layout(self):
        assert set(LAYOUTS) == set(CgroupVersion)
        for version, layout in LAYOUTS.items():
            assert layout.version is version

    def test_v1_stat_whitelist(self):
        assert LAYOUTS[CgroupVersion.V1].memory_stat_keys == ("cache", "rss", "mapped_file", "inactive_anon")

    def test_v2_stat_whitelist(self):
        assert LAYOUTS[CgroupVersion.V2].memory_stat_keys == ("anon", "file", "kernel_stack", "slab")

    def test_v1_splits_quota_and_period(self):
        assert len(LAYOUTS[CgroupVersion.V1].cpu_limit) == 2
        assert LAYOUTS[CgroupVersion.V2].cpu_limit == ("cpu.max",)
