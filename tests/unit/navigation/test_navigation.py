"""Tests for pending/committed path handling in ``PathNavigator``."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from csfm.directory_model import ListingResult, list_directory
from csfm.errors import DirectoryReadError
from csfm.navigation import PathNavigator, parent_path, target_for


class ParentPathTests(unittest.TestCase):
    def test_parent_of_root_is_root(self) -> None:
        root = Path(Path.cwd().anchor)
        self.assertEqual(parent_path(root), root)
        self.assertEqual(parent_path(parent_path(root)), parent_path(root))

    def test_target_for_makes_typed_text_absolute(self) -> None:
        self.assertEqual(target_for("sub"), Path.cwd() / "sub")
        self.assertEqual(target_for("~"), Path.home())


class PathNavigatorTests(unittest.TestCase):
    def test_set_path_does_not_list_or_commit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            navigator = PathNavigator(root)

            navigator.set_path("/definitely/not/here")

            self.assertEqual(navigator.pending_path, "/definitely/not/here")
            self.assertEqual(navigator.current_path, root)
            self.assertEqual(navigator.listing, ())

    def test_navigate_into_empty_directory_clears_previous_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("", encoding="utf-8")
            empty = root / "empty"
            empty.mkdir()
            navigator = PathNavigator(root)
            navigator.navigate()
            self.assertEqual(len(navigator.listing), 2)

            result = navigator.jump_to(empty)

            self.assertTrue(result.ok)
            self.assertEqual(navigator.current_path, empty)
            self.assertEqual(navigator.listing, ())
            self.assertEqual(navigator.pending_path, str(empty))

    def test_unreadable_path_keeps_committed_state(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "keep.txt").write_text("", encoding="utf-8")
            navigator = PathNavigator(root)
            navigator.navigate()
            before = (navigator.current_path, navigator.listing)

            result = navigator.jump_to(root / "missing")

            self.assertFalse(result.ok)
            self.assertEqual((navigator.current_path, navigator.listing), before)
            self.assertEqual(navigator.pending_path, str(root))

    def test_up_moves_to_parent_and_is_idempotent_at_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            child = root / "child"
            child.mkdir()
            navigator = PathNavigator(child)

            navigator.up()
            self.assertEqual(navigator.current_path, root)

        fs_root = Path(Path.cwd().anchor)

        def fake_lister(path: Path, show_hidden: bool) -> ListingResult:
            return ListingResult(path=path)

        navigator = PathNavigator(fs_root)
        navigator.up(fake_lister)
        self.assertEqual(navigator.current_path, fs_root)
        navigator.up(fake_lister)
        self.assertEqual(navigator.current_path, fs_root)

    def test_superseded_request_is_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            slow = root / "slow"
            fast = root / "fast"
            slow.mkdir()
            fast.mkdir()
            (slow / "stale.txt").write_text("", encoding="utf-8")
            navigator = PathNavigator(root)

            navigator.set_path(str(slow))
            slow_request = navigator.request_navigation()
            navigator.set_path(str(fast))
            fast_request = navigator.request_navigation()

            self.assertTrue(navigator.apply_listing(fast_request, ListingResult(path=fast)))
            stale = ListingResult(path=slow, entries=())
            self.assertIsNone(navigator.apply_listing(slow_request, stale))
            self.assertEqual(navigator.current_path, fast)

    def test_request_is_dropped_when_pending_text_changed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            navigator = PathNavigator(root)
            request = navigator.request_navigation()
            navigator.set_path(str(root / "typing"))

            self.assertIsNone(navigator.apply_listing(request, ListingResult(path=root)))
            self.assertEqual(navigator.pending_path, str(root / "typing"))

    def test_failed_apply_reports_false(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            navigator = PathNavigator(root)
            request = navigator.request_navigation()
            failed = ListingResult(path=root, error=DirectoryReadError("boom"))

            self.assertIs(navigator.apply_listing(request, failed), False)

    def test_hidden_filter_is_committed_only_with_successful_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".dot").write_text("", encoding="utf-8")
            navigator = PathNavigator(root)
            navigator.navigate()

            navigator.set_path(str(root / "missing"))
            failed = navigator.request_navigation(show_hidden=True)
            navigator.apply_listing(failed, ListingResult(path=failed.target, error=DirectoryReadError("gone")))
            self.assertFalse(navigator.show_hidden)

            navigator.set_path(str(root))
            request = navigator.request_navigation(show_hidden=True)
            navigator.apply_listing(request, list_directory(request.target, request.show_hidden))
            self.assertTrue(navigator.show_hidden)
            self.assertEqual([entry.name for entry in navigator.listing], [".dot"])


if __name__ == "__main__":
    unittest.main()
