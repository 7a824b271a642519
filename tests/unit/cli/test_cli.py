"""CLI argument and command parsing tests.

Verifies ``csfm.cli.main`` list mode and the typed-command translation used
by the interactive prompt.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import csfm
from csfm import cli
from csfm.bookmarks import Bookmark
from csfm.config import Configuration
from csfm.runtime import (
    BookmarkSelected,
    DeleteDir,
    DeleteFile,
    NavigateInto,
    NavigateUp,
    Noop,
    Open,
    Quit,
    RuntimeServices,
    ToggleHidden,
    bootstrap_state,
)


def _state(root: Path, bookmarks: tuple[Bookmark, ...] = ()):
    services = RuntimeServices(
        confirm=lambda _q: False,
        notify=lambda _m: None,
        load_config=lambda: (Configuration(bookmarks=bookmarks), None),
    )
    return bootstrap_state(services, root)


class CliListModeTests(unittest.TestCase):
    def test_list_mode_prints_entries_and_exits_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "dir").mkdir()
            (root / "file.txt").write_text("", encoding="utf-8")
            (root / ".hidden").write_text("", encoding="utf-8")
            stdout = io.StringIO()

            with mock.patch("sys.stdout", stdout), self.assertRaises(SystemExit) as exit_ctx:
                cli.main([str(root), "--list"])

        self.assertEqual(exit_ctx.exception.code, 0)
        self.assertEqual(stdout.getvalue(), "dir/\nfile.txt\n")

    def test_list_mode_show_hidden(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".hidden").write_text("", encoding="utf-8")
            stdout = io.StringIO()

            with mock.patch("sys.stdout", stdout), self.assertRaises(SystemExit):
                cli.main([str(root), "--list", "--show-hidden"])

        self.assertEqual(stdout.getvalue(), ".hidden\n")

    def test_list_mode_unreadable_path_exits_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            stderr = io.StringIO()
            with mock.patch("sys.stderr", stderr), self.assertRaises(SystemExit) as exit_ctx:
                cli.main([str(Path(tmp) / "missing"), "--list"])

        self.assertEqual(exit_ctx.exception.code, 1)
        self.assertIn("missing", stderr.getvalue())

    def test_package_main_forwards_argv_to_cli(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "only.txt").write_text("", encoding="utf-8")
            stdout = io.StringIO()

            with mock.patch("sys.stdout", stdout), self.assertRaises(SystemExit) as exit_ctx:
                csfm.main([str(root), "--list"])

        self.assertEqual(exit_ctx.exception.code, 0)
        self.assertEqual(stdout.getvalue(), "only.txt\n")


class ParseCommandTests(unittest.TestCase):
    def test_commands_map_to_intents(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / "a file.txt").write_text("", encoding="utf-8")
            home = Bookmark(title="Home", target_path=str(root))
            state = _state(root, bookmarks=(home,))
            notes: list[str] = []

            def parse(line: str):
                return cli.parse_command(line, state, notes.append)

            self.assertEqual(parse("up"), NavigateUp())
            self.assertEqual(parse("quit"), Quit())
            self.assertEqual(parse("hidden"), ToggleHidden())
            self.assertEqual(parse("cd sub"), NavigateInto(root / "sub"))
            self.assertEqual(parse("open sub"), NavigateInto(root / "sub"))
            self.assertEqual(parse("open 'a file.txt'"), Open(root / "a file.txt"))
            self.assertEqual(parse("rm sub"), DeleteDir(root / "sub"))
            self.assertEqual(parse('rm "a file.txt"'), DeleteFile(root / "a file.txt"))
            self.assertEqual(parse("b 1"), BookmarkSelected(home))
            self.assertEqual(parse("b Home"), BookmarkSelected(home))
            self.assertEqual(notes, [])

    def test_bad_commands_notify_and_noop(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            state = _state(root)
            notes: list[str] = []

            self.assertEqual(cli.parse_command("", state, notes.append), Noop())
            self.assertEqual(cli.parse_command("frobnicate x", state, notes.append), Noop())
            self.assertEqual(cli.parse_command("rm ghost", state, notes.append), Noop())
            self.assertEqual(cli.parse_command("b 7", state, notes.append), Noop())
            self.assertEqual(cli.parse_command("cd", state, notes.append), Noop())
            self.assertEqual(len(notes), 4)


class RenderListingTests(unittest.TestCase):
    def test_render_shows_sidebar_path_and_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "d").mkdir()
            state = _state(root, bookmarks=(Bookmark(title="Home", target_path="/home"),))
            out = io.StringIO()

            cli.render_listing(state, out)
            state.sidebar_visible = False
            hidden_sidebar = io.StringIO()
            cli.render_listing(state, hidden_sidebar)

        self.assertEqual(out.getvalue(), f"Places: [1] Home\n{root}\n  d/\n")
        self.assertEqual(hidden_sidebar.getvalue(), f"{root}\n  d/\n")


if __name__ == "__main__":
    unittest.main()
