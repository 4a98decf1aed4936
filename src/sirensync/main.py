#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from sirensync.app import fetch_song, sync_new_songs
from sirensync.config import configure_logging
from sirensync.domain.model import SongId

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {parsed}")
    return parsed


def _song_id(value: str) -> SongId:
    try:
        return SongId.try_new(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sirensync",
        description="Keep a local music catalog in sync with Monster Siren",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    add_new = commands.add_parser(
        "add-new-songs",
        help="Download and store every remote song missing locally",
    )
    add_new.add_argument(
        "--concurrency",
        type=_positive_int,
        help="Maximum songs processed at once (default: SIRENSYNC_CONCURRENCY or 8)",
    )
    add_new.add_argument(
        "--keep-going",
        action="store_true",
        help="Record failing songs and continue instead of stopping at the first failure",
    )

    fetch = commands.add_parser(
        "fetch-song",
        help="Fetch and validate one song without storing it",
    )
    fetch.add_argument("song_id", type=_song_id, help="Catalog song id, e.g. 514526")
    return parser


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    return _build_parser().parse_args(list(argv))


def _add_new_songs(args: argparse.Namespace) -> int:
    result = sync_new_songs(concurrency=args.concurrency, fail_fast=not args.keep_going)
    if not result.new_song_ids:
        print("Catalog is up to date")
        return 0
    for song_id in result.stored:
        print(song_id.padded())
    for song_id, error in result.failures.items():
        print(f"Failed {song_id.padded()}: {error}", file=sys.stderr)
    return 0 if result.ok else 1


def _fetch_song(args: argparse.Namespace) -> int:
    song = fetch_song(args.song_id)
    artists = ", ".join(song.artists) or "-"
    print(f"{song.id.padded()}  {song.name}")
    print(f"  album:   {song.album_id.padded()} (track {song.track_number})")
    print(f"  artists: {artists}")
    print(f"  audio:   {song.source.format} {song.source.size} bytes -> {song.source.save_path}")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    handlers = {"add-new-songs": _add_new_songs, "fetch-song": _fetch_song}
    try:
        exit_code = handlers[parsed_args.command](parsed_args)
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
