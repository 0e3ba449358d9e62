"""Command-line interface for weekly-sets."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import Sequence

from .config import load_paths
from .db import SqliteBlobStore, get_conn, init_db
from .diagnose import run_diagnose
from .logging_utils import get_logger, setup_logging
from .report import run_report
from .status import run_status
from .store import Outcome, WeekEpochStore

LOG = get_logger(__name__)

OUTCOME_MESSAGES = {
    Outcome.DUPLICATE: "A body part with that name already exists",
    Outcome.EMPTY_NAME: "Body part name must not be empty",
    Outcome.NOT_FOUND: "No body part with that id",
}


def _connect():
    paths = load_paths()
    paths.data.mkdir(parents=True, exist_ok=True)
    return get_conn(str(paths.db))


def handle_init_db(_args: argparse.Namespace) -> int:
    db_path = load_paths().db

    LOG.info("Initializing database at %s", db_path)
    conn = _connect()
    try:
        init_db(conn)
    finally:
        conn.close()
    print(f"Database initialized at {db_path}")
    return 0


def handle_status(_args: argparse.Namespace) -> int:
    now = datetime.now()
    conn = _connect()
    try:
        store = WeekEpochStore(SqliteBlobStore(conn))
        store.load(now)
        run_status(store.dataset, now)
    finally:
        conn.close()
    return 0


def handle_report(_args: argparse.Namespace) -> int:
    now = datetime.now()
    conn = _connect()
    try:
        store = WeekEpochStore(SqliteBlobStore(conn))
        store.load(now)
        output = run_report(store.dataset, now)
    finally:
        conn.close()

    print(f"Report written to {output}")
    return 0


def handle_diagnose(_args: argparse.Namespace) -> int:
    conn = _connect()
    try:
        return run_diagnose(SqliteBlobStore(conn), datetime.now())
    finally:
        conn.close()


def _mutate(args: argparse.Namespace) -> int:
    now = datetime.now()
    conn = _connect()
    try:
        store = WeekEpochStore(SqliteBlobStore(conn))
        store.load(now)
        if args.command == "add":
            _, outcome = store.add_item(args.name)
        elif args.command == "inc":
            _, outcome = store.adjust_sets(args.id, args.by)
        elif args.command == "dec":
            _, outcome = store.adjust_sets(args.id, -args.by)
        else:
            _, outcome = store.remove_item(args.id)

        if outcome is not Outcome.APPLIED:
            print(OUTCOME_MESSAGES[outcome], file=sys.stderr)
            return 1
        run_status(store.dataset, now)
    finally:
        conn.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wst",
        description="Weekly workout sets tracker",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subcommands = [
        ("init-db", handle_init_db, "Initialize local storage"),
        ("status", handle_status, "Show this week's sets"),
        ("report", handle_report, "Render HTML report"),
        ("diagnose", handle_diagnose, "Inspect stored week state without changing it"),
        ("add", _mutate, "Track a new body part"),
        ("inc", _mutate, "Add sets to a body part"),
        ("dec", _mutate, "Remove sets from a body part"),
        ("remove", _mutate, "Stop tracking a body part"),
    ]

    for name, handler, help_text in subcommands:
        subparser = subparsers.add_parser(name, help=help_text)
        subparser.set_defaults(func=handler)

        if name == "add":
            subparser.add_argument("name", help="Body part name")
        elif name in {"inc", "dec", "remove"}:
            subparser.add_argument("id", type=int, help="Body part id (see status)")

        if name in {"inc", "dec"}:
            subparser.add_argument(
                "--by",
                type=int,
                default=1,
                help="Number of sets to add or remove; defaults to 1",
            )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
