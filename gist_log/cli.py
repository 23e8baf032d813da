"""
Command-line entry point: ask the questions, merge, save to the gist.
"""
import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from .config import CONFIG_FILE, ConfigError, load_config
from .document import merge_entry
from .gist import GistStore
from .prompts import collect_answers


def iso_date(value: str) -> str:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date().isoformat()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = argparse.ArgumentParser(prog="gist-log", description="Log your day to a GitHub Gist")
    parser.add_argument("-d", "--date", type=iso_date, metavar="YYYY-MM-DD",
                        help="Specify the date for the log (YYYY-MM-DD)")
    parser.add_argument("--config", type=Path, default=CONFIG_FILE,
                        help=f"Path to the YAML config file (default: {CONFIG_FILE})")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def setup_logging(log_file: Path) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(filename=log_file, level=logging.DEBUG,
                        format='%(asctime)s [%(levelname)s] %(message)s', force=True)


def main(argv=None, ask=input, say=print, store_factory=GistStore) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_file)
    date = args.date or today()
    is_updated = args.date is not None
    logging.info(f"Logging {date} to gist {config.gist_id} ({config.filename})")

    try:
        answers = collect_answers(ask, say)
    except (KeyboardInterrupt, EOFError):
        say("")
        logging.info("Aborted while prompting")
        sys.exit(130)

    store = store_factory(config)
    try:
        content = store.fetch(config.filename)
        content = merge_entry(content, date, answers)
        store.save(config.filename, content)
    except Exception:
        logging.exception(f"Failed to update gist {config.gist_id}")
        raise

    logging.info(f"Saved entry for {date}")
    say(f"Log {'updated' if is_updated else 'added'} ✍  for {date} in Gist ✌")
    return 0
