"""Command line entry point for Bridge Spy."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from bridgespy.constants import APP_VERSION
from bridgespy.constants.enums import FilterMode
from bridgespy.models.state.config_manager import ConfigManager, ConfigSaveError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bridgespy",
        description="Live terminal view of bridge calls recorded as JSON lines.",
    )
    parser.add_argument(
        "logfile",
        nargs="?",
        type=Path,
        help="JSONL file of bridge events to follow",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="show simulated traffic instead of reading a file",
    )
    parser.add_argument(
        "--no-follow",
        dest="follow",
        action="store_false",
        default=None,
        help="read the file once instead of following it",
    )
    parser.add_argument(
        "--from-end",
        dest="start_at_end",
        action="store_true",
        default=None,
        help="skip the existing file content and show only new lines",
    )
    parser.add_argument(
        "--filter-mode",
        choices=[mode.value for mode in FilterMode],
        default=None,
        help="how several column filters combine (default: first)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="write debug logs to this file",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="write the effective settings to the settings file and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def configure_logging(log_file: Path | None) -> None:
    """Route log records to ``log_file``; Textual owns the terminal otherwise."""
    root = logging.getLogger()
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=str(log_file.expanduser()),
        level=logging.DEBUG,
        format=LOG_FORMAT,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.demo and args.logfile is not None:
        parser.error("LOGFILE and --demo are mutually exclusive")

    configure_logging(args.log_file)

    from bridgespy.app import BridgeSpyApp

    app = BridgeSpyApp(
        source_path=args.logfile,
        demo=args.demo,
        follow=args.follow,
        start_at_end=args.start_at_end,
        filter_mode=args.filter_mode,
    )
    logger.info("Starting %s", app.title)
    if args.save_config:
        try:
            path = ConfigManager.save(app.settings)
        except ConfigSaveError as exc:
            parser.exit(1, f"bridgespy: {exc}\n")
        print(f"Saved settings to {path}")
        return 0
    app.run()
    return 0
