"""Command-line front door for csfm.

Parses CLI options and either prints one listing (``--list``) or runs a
line-oriented browser that turns typed commands into runtime intents.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from collections.abc import Callable
from dataclasses import replace
from functools import partial
from pathlib import Path
from typing import TextIO

from .config import load_configuration
from .dialogs import TerminalDialogs, default_dialogs
from .directory_model import DirectoryEntry, list_directory
from .runtime import (
    AppState,
    BookmarkSelected,
    DeleteDir,
    DeleteFile,
    ListingScheduler,
    NavigateInto,
    NavigateUp,
    Noop,
    Open,
    Quit,
    Refresh,
    ReloadConfig,
    RuntimeServices,
    ToggleHidden,
    ToggleSidebar,
    bootstrap_state,
    run_intent_loop,
)
from .runtime.intents import Intent

HELP_TEXT = """\
commands:
  ls                 re-list the current directory
  cd PATH            enter a directory (relative to the current one)
  up                 go to the parent directory
  open NAME          open a file, or enter a directory
  rm NAME            delete a file or directory (asks first)
  bookmarks          list bookmarks
  b N|TITLE          jump to a bookmark by number or title
  hidden             toggle hidden files
  sidebar            toggle the bookmark sidebar
  reload             reload the config file
  quit               exit"""


def format_entry(entry: DirectoryEntry) -> str:
    return f"{entry.name}/" if entry.is_dir else entry.name


def render_listing(state: AppState, out: TextIO) -> None:
    """Plain-text rendering of sidebar, address line, and listing."""
    if state.sidebar_visible and len(state.bookmarks):
        places = "  ".join(f"[{idx}] {bookmark.title}" for idx, bookmark in enumerate(state.bookmarks.list(), start=1))
        out.write(f"Places: {places}\n")
    hidden = " (hidden shown)" if state.show_hidden else ""
    out.write(f"{state.current_path}{hidden}\n")
    for entry in state.listing:
        out.write(f"  {format_entry(entry)}\n")
    if not state.listing:
        out.write("  (empty)\n")
    out.flush()


def _find_entry(state: AppState, name: str) -> DirectoryEntry | None:
    return next((entry for entry in state.listing if entry.name == name), None)


def _target_path(state: AppState, raw: str) -> Path:
    path = Path(raw).expanduser()
    return path if path.is_absolute() else state.current_path / path


def parse_command(line: str, state: AppState, notify: Callable[[str], None]) -> Intent:
    """Translate one typed command into an intent.

    Unknown or incomplete commands notify and yield ``Noop``.
    """
    try:
        words = shlex.split(line)
    except ValueError as exc:
        notify(f"Cannot parse command: {exc}")
        return Noop()
    if not words:
        return Noop()
    command, args = words[0], words[1:]
    arg = " ".join(args)

    if command in {"q", "quit", "exit"}:
        return Quit()
    if command == "ls":
        return Refresh()
    if command == "up":
        return NavigateUp()
    if command == "hidden":
        return ToggleHidden()
    if command == "sidebar":
        return ToggleSidebar()
    if command == "reload":
        return ReloadConfig()
    if command in {"help", "?"}:
        print(HELP_TEXT)
        return Noop()
    if command == "bookmarks":
        for idx, bookmark in enumerate(state.bookmarks.list(), start=1):
            print(f"[{idx}] {bookmark.title} -> {bookmark.target_path}")
        return Noop()
    if not arg:
        notify(f"'{command}' needs an argument (try 'help')")
        return Noop()

    if command == "cd":
        return NavigateInto(_target_path(state, arg))
    if command == "b":
        bookmarks = state.bookmarks.list()
        bookmark = None
        if arg.isdigit() and 1 <= int(arg) <= len(bookmarks):
            bookmark = bookmarks[int(arg) - 1]
        else:
            bookmark = state.bookmarks.find(arg)
        if bookmark is None:
            notify(f"No bookmark '{arg}'")
            return Noop()
        return BookmarkSelected(bookmark)
    if command in {"open", "rm"}:
        entry = _find_entry(state, arg)
        if entry is None:
            notify(f"No entry named '{arg}'")
            return Noop()
        if command == "open":
            return NavigateInto(entry.path) if entry.is_dir else Open(entry.path)
        return DeleteDir(entry.path) if entry.is_dir else DeleteFile(entry.path)

    notify(f"Unknown command '{command}' (try 'help')")
    return Noop()


def _print_listing(path: Path, show_hidden: bool) -> int:
    result = list_directory(path, show_hidden)
    if not result.ok:
        sys.stderr.write(f"{result.error}\n")
        return 1
    for entry in result.entries:
        sys.stdout.write(f"{format_entry(entry)}\n")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch csfm."""
    parser = argparse.ArgumentParser(description="Browse directories, open files, and delete entries.")
    parser.add_argument("path", nargs="?", default=None, help="Starting directory. Defaults to current directory.")
    parser.add_argument("--config", type=Path, default=None, help="Config file to use instead of the default location.")
    parser.add_argument("--show-hidden", action="store_true", help="Show hidden entries regardless of config.")
    parser.add_argument("--list", action="store_true", help="Print the listing of PATH and exit.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr diagnostics.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    start = Path(args.path).expanduser().absolute() if args.path else None
    if args.list:
        raise SystemExit(_print_listing(start or Path.cwd(), args.show_hidden))

    def load_config():
        config, error = load_configuration(args.config)
        if args.show_hidden:
            config = replace(config, show_hidden_files=True)
        return config, error

    dialogs = default_dialogs()
    # Notifications in a terminal session belong next to the prompt.
    terminal = dialogs if isinstance(dialogs, TerminalDialogs) else TerminalDialogs()
    scheduler = ListingScheduler()
    services = RuntimeServices(
        confirm=dialogs.ask,
        notify=terminal.notify,
        load_config=load_config,
        submit_listing=scheduler.schedule,
    )
    state = bootstrap_state(services, start)

    def next_intent(current: AppState) -> Intent | None:
        try:
            line = input("csfm> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        return parse_command(line, current, services.notify)

    run_intent_loop(
        state,
        services,
        next_intent=next_intent,
        render=partial(render_listing, out=sys.stdout),
        scheduler=scheduler,
    )


if __name__ == "__main__":
    main()
