"""Tests for the directory scanner."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from locstat.core.config import ScanConfig
from locstat.exceptions import ScanLimitExceeded
from locstat.models import ScanReport
from locstat.progress import ProgressTracker
from locstat.scanner import Scanner, filespec_matches

TREE = {
    "src/main.c": "int main() {\n    return 0; // ok\n}\n",
    "src/util.py": "# helper\n\ndef f():\n    pass\n",
    "src/lib/deep.rs": "/* doc */\nfn x() {}\n",
    "README": "not counted\n",
    "notes.txt": "not counted either\n",
    "node_modules/pkg/index.js": "var x = 1;\n",
    "build/gen.c": "int generated;\n",
    "vendor/lib/skip.go": "package skip\n",
}


def _scan(root: Path, **kwargs) -> ScanReport:
    return Scanner(ScanConfig(**kwargs)).scan(root)


def _languages(report) -> dict[str, int]:
    return {lang: t.files for lang, t in report.by_language().items()}


class TestScan:
    def test_aggregates_by_directory_and_language(self, make_tree):
        root = make_tree(TREE)
        report = _scan(root)

        src = str(root.resolve() / "src")
        assert set(report.directories[src]) == {"C/C++", "Python"}
        c_totals = report.directories[src]["C/C++"]
        assert c_totals.files == 1
        assert (c_totals.stats.code, c_totals.stats.comment, c_totals.stats.blank) == (3, 0, 0)

        py = report.directories[src]["Python"].stats
        assert (py.code, py.comment, py.blank) == (2, 1, 1)

    def test_default_ignored_dirs(self, make_tree):
        report = _scan(make_tree(TREE))
        assert "JavaScript" not in _languages(report)
        assert _languages(report)["C/C++"] == 1  # build/gen.c skipped

    def test_totals(self, make_tree):
        report = _scan(make_tree(TREE))
        assert _languages(report) == {"C/C++": 1, "Go": 1, "Python": 1, "Rust": 1}
        assert report.files_processed == 4
        total = report.grand_total()
        assert total.total == report.lines_processed == 3 + 4 + 2 + 1
        assert report.error_count == 0

    def test_user_ignore_matches_path_suffix(self, make_tree):
        report = _scan(make_tree(TREE), ignore=["vendor/lib"])
        assert "Go" not in _languages(report)

    def test_user_ignore_single_name(self, make_tree):
        report = _scan(make_tree(TREE), ignore=["lib"])
        assert "Rust" not in _languages(report)
        assert "Go" not in _languages(report)

    def test_non_recursive(self, make_tree):
        root = make_tree({"top.py": "x = 1\n", "sub/inner.py": "y = 2\n"})
        report = _scan(root, non_recursive=True)
        assert report.files_processed == 1
        assert report.files[0].path.endswith("top.py")

    def test_max_depth_warns_and_counts(self, make_tree):
        root = make_tree({"a/one.py": "x\n", "a/b/two.py": "y\n"})
        report = _scan(root, max_depth=1)
        assert report.files_processed == 1
        assert report.error_count == 1

    def test_filespec_by_name(self, make_tree):
        report = _scan(make_tree(TREE), filespec="*.py")
        assert _languages(report) == {"Python": 1}

    def test_filespec_by_relative_path(self, make_tree):
        report = _scan(make_tree(TREE), filespec="src/*.c")
        assert _languages(report) == {"C/C++": 1}

    def test_entry_limit(self, make_tree):
        root = make_tree({"a.py": "x\n", "b.py": "y\n", "c.py": "z\n"})
        with pytest.raises(ScanLimitExceeded) as exc_info:
            _scan(root, max_entries=2)
        assert exc_info.value.limit == 2

    def test_entry_limit_counts_unknown_files(self, make_tree):
        root = make_tree({"a.txt": "x\n", "b.txt": "y\n"})
        with pytest.raises(ScanLimitExceeded):
            _scan(root, max_entries=1)

    def test_single_file_path(self, make_tree):
        root = make_tree(TREE)
        report = _scan(root / "src" / "util.py")
        assert report.files_processed == 1
        assert _languages(report) == {"Python": 1}

    def test_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            _scan(tmp_path / "nope")

    def test_size_cap_skips_files(self, make_tree):
        root = make_tree({"small.py": "x\n", "big.py": "x = 1\n" * 50})
        report = _scan(root, max_file_size=20)
        assert report.files_processed == 1
        assert len(report.skipped) == 1
        assert report.skipped[0].endswith("big.py")
        assert report.error_count == 0

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_not_followed(self, make_tree, tmp_path_factory):
        outside = tmp_path_factory.mktemp("outside")
        (outside / "ext.py").write_text("x = 1\n")
        root = make_tree({"real.py": "y = 2\n"})
        os.symlink(outside, root / "linked_dir")
        os.symlink(outside / "ext.py", root / "linked.py")
        report = _scan(root)
        assert report.files_processed == 1

    def test_unreadable_file_is_failure(self, make_tree):
        root = make_tree({"ok.py": "x = 1\n", "bad.py": "y = 2\n"})
        from locstat.engine import analyzer

        real_read = analyzer._read_lines

        def fake_read(path):
            if path.name == "bad.py":
                raise PermissionError(13, "Permission denied", str(path))
            return real_read(path)

        with patch.object(analyzer, "_read_lines", side_effect=fake_read):
            report = _scan(root)

        assert report.files_processed == 1
        assert report.error_count == 1
        assert len(report.failures) == 1
        assert report.failures[0].path.endswith("bad.py")
        assert "Permission denied" in report.failures[0].reason
        assert report.grand_total().total == 1

    def test_results_sorted_by_path(self, make_tree):
        root = make_tree({f"f{i}.py": "x\n" for i in range(5)})
        report = _scan(root, jobs=3)
        paths = [r.path for r in report.files]
        assert paths == sorted(paths)

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            Scanner(ScanConfig(jobs=0))


class TestProgressIntegration:
    def test_counters_recorded(self, make_tree):
        root = make_tree({"a.py": "x\n\n"})
        tracker = ProgressTracker()
        Scanner(ScanConfig(), progress=tracker).scan(root)
        assert tracker.files == 1
        assert tracker.lines == 2

    def test_finish_ticks_once_more(self, make_tree):
        root = make_tree({"a.py": "x\n", "b.py": "y\n"})
        tracker = ProgressTracker(interval=3600)
        ticks = []
        tracker.tick_callbacks.append(ticks.append)
        Scanner(ScanConfig(), progress=tracker).scan(root)
        assert len(ticks) == 2
        assert ticks[-1].files == 2


class TestScanAsync:
    @pytest.mark.asyncio
    async def test_scan_async(self, make_tree):
        root = make_tree({"a.rs": "// c\nfn main() {}\n", "b.rs": "\n"})
        report = await Scanner(ScanConfig(jobs=1)).scan_async(root)
        totals = report.by_language()["Rust"]
        assert totals.files == 2
        assert (totals.stats.code, totals.stats.comment, totals.stats.blank) == (1, 1, 1)
        assert report.elapsed >= 0


class TestFilespecMatches:
    def test_name_match(self, tmp_path):
        assert filespec_matches("*.py", tmp_path, tmp_path / "a" / "b.py")

    def test_relative_match(self, tmp_path):
        assert filespec_matches("a/*.py", tmp_path, tmp_path / "a" / "b.py")
        assert not filespec_matches("c/*.py", tmp_path, tmp_path / "a" / "b.py")

    def test_outside_root(self, tmp_path):
        assert not filespec_matches("x/*.py", tmp_path / "x", tmp_path / "y" / "b.py")
