"""
CLI entrypoint for browsing a files-as-storage tree.

This script performs the following steps:
- loads .env, configs/storage.yaml (both optional)
- configures logging
- builds the accessor from configuration
- runs the requested command:
    list                      print the taxonomy directories
    get <name> [identifier]   print a taxonomy (or one item) as JSON
"""

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import make_storage
from domain.errors import StorageError
from infrastructure.config import load_storage_config
from infrastructure.constants import STORAGE_CONFIG_FILE
from infrastructure.observability import configure_logging, make_session_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Read taxonomies from a files-as-storage directory")
    p.add_argument(
        "--config",
        type=str,
        default=str(STORAGE_CONFIG_FILE),
        help="Path to storage.yaml (default: configs/storage.yaml; skipped if missing)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env; skipped if missing)",
    )
    p.add_argument(
        "--storage-dir",
        type=str,
        default=None,
        help="Storage root directory (overrides config and FILES_AS_STORAGE_DIR)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Optional rotating log file (DEBUG level)",
    )

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List taxonomy directories")
    get = sub.add_parser("get", help="Print a taxonomy or a single item as JSON")
    get.add_argument("name", help="Taxonomy name, e.g. MagicPlace, getMagicPlace or magic_place")
    get.add_argument("identifier", nargs="?", default=None, help="Item identifier (optional)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level),
    )

    session_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{os.getpid()}"
    set_log_context(session_id=session_id)
    logger.info("Starting session: %s (tag=%s)", session_id, make_session_tag(session_id))

    config_path = Path(args.config)
    try:
        cfg = load_storage_config(
            config_path if config_path.exists() else None,
            storage_dir=Path(args.storage_dir) if args.storage_dir else None,
        )
    except ValueError as e:
        # pydantic ValidationError is a ValueError
        logger.error("Invalid storage configuration: %s", e)
        return 1
    storage = make_storage(cfg)

    if args.command == "list":
        for info in storage.discover():
            print(info.name)
        return 0

    try:
        result = storage.lookup(args.name, args.identifier)
    except StorageError as e:
        logger.error("%s", e)
        return 1

    if args.identifier is None:
        result = dict(result)
    print(json.dumps(result, ensure_ascii=False, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
