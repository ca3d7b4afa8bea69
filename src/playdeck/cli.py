"""Command-line interface for PlayDeck."""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys
import threading
from types import TracebackType
from typing import Iterable, Optional, Tuple

from playdeck.config import AppConfig, load_config, save_config
from playdeck.logging_setup import init_logging
from playdeck.snapshot import LibrarySnapshot, load_snapshot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(prog="playdeck", description="PlayDeck")
    parser.add_argument(
        "library",
        nargs="?",
        default="",
        help="Path to a JSON library snapshot (queue and playlists)",
    )
    return parser


def _resolve_library(arg: str, config: AppConfig) -> Optional[Path]:
    if arg:
        return Path(arg)
    if config.last_library_path:
        return Path(config.last_library_path)
    return None


def _remember_library(path: Path, config: AppConfig) -> None:
    resolved = str(path.resolve())
    if resolved == config.last_library_path:
        return
    try:
        save_config(replace(config, last_library_path=resolved))
    except OSError:
        logger.exception("Failed to save config")


def _run_tui(snapshot: LibrarySnapshot, config: AppConfig) -> int:
    try:
        from playdeck.tui import run_tui
    except (ImportError, RuntimeError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return run_tui(snapshot, config=config)


def _install_exception_hooks() -> None:
    def excepthook(exc_type, exc, tb) -> None:
        logger.exception("Uncaught exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    def thread_hook(args: threading.ExceptHookArgs) -> None:
        exc_value = args.exc_value or RuntimeError("unknown")
        exc_info: Tuple[
            type[BaseException], BaseException, Optional[TracebackType]
        ] = (
            args.exc_type,
            exc_value,
            args.exc_traceback,
        )
        thread_name = args.thread.name if args.thread else "thread"
        logger.exception("Thread exception in %s", thread_name, exc_info=exc_info)

    threading.excepthook = thread_hook


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    init_logging()
    logger.info("App start")
    _install_exception_hooks()

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    config = load_config()
    library_path = _resolve_library(args.library, config)
    snapshot = LibrarySnapshot()
    if library_path is not None and library_path.is_file():
        snapshot = load_snapshot(library_path)
        _remember_library(library_path, config)
    elif args.library:
        print(f"Library snapshot not found: {library_path}", file=sys.stderr)
        return 1
    elif library_path is not None:
        logger.warning("Remembered library %s is missing", library_path)

    exit_code = _run_tui(snapshot, config)
    logger.info("App exit code=%s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
