"""CLI entry point for drinklog."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .db import DrinkDB, EntryDB
from .errors import DrinkLogError
from .parsing.dates import DateContext, resolve_date_context
from .parsing.tokenizer import tokenize_line
from .pipeline import ImportRun, parse_fields
from .reports import ResolvedEntry
from .service import AggregatedEntry, DrinkLogService


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="drinklog",
        description="Import and summarize a hand-written drink log",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="path to a TOML config file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # import
    import_parser = sub.add_parser("import", help="import a drink log file")
    import_parser.add_argument("file", type=str, help="log file, one entry per line")
    import_parser.add_argument("--db", type=str, default=None, help="database path")

    # list
    list_parser = sub.add_parser("list", help="list entries with drink estimates")
    list_parser.add_argument(
        "--date", type=date.fromisoformat, default=None, metavar="YYYY-MM-DD",
        help="only show entries from this day",
    )
    list_parser.add_argument("--json", action="store_true", help="output JSON")
    list_parser.add_argument("--db", type=str, default=None, help="database path")

    # parse
    parse_parser = sub.add_parser("parse", help="parse a single line without saving")
    parse_parser.add_argument("line", type=str)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    load_dotenv()
    config = load_config(args.config)
    if getattr(args, "db", None):
        config.database.path = args.db

    match args.command:
        case "import":
            _cmd_import(config, args)
        case "list":
            _cmd_list(config, args)
        case "parse":
            _cmd_parse(config, args)


def format_row(entry: ResolvedEntry) -> str:
    """One aligned report line for an imported entry."""
    return (
        f"{entry.context.date.strftime('%d %b %Y'):11} | "
        f"{entry.context.time.value:9} | "
        f"{', '.join(entry.context.context):10} | "
        f"{str(entry.quantity):10} | "
        f"({entry.drink_id:3}) {entry.drink.name:40} | "
        f"{str(entry.drink.abv) if entry.drink.abv else '':5} | "
        f"{str(entry.volume) if entry.volume else '':10}"
    )


def _cmd_import(config, args) -> None:
    path = Path(args.file)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(1)

    drinks = DrinkDB(config.database.path)
    entries = EntryDB(config.database.path, person_id=config.database.person_id)
    start = DateContext.seed(config.importer.start_date, config.importer.start_time)
    try:
        with open(path, encoding="utf-8") as f:
            summary = ImportRun(drinks, entries, start=start).run(f)
    finally:
        drinks.close()
        entries.close()

    for entry in summary.imported:
        print(format_row(entry))
    print(
        f"\nImported {len(summary.imported)} of {summary.lines_read} lines "
        f"({len(summary.skipped)} skipped, {summary.drinks_registered} drinks)"
    )
    for skipped in summary.skipped:
        print(f"  line {skipped.line_no}: {skipped.reason}", file=sys.stderr)


def _cmd_list(config, args) -> None:
    drinks = DrinkDB(config.database.path)
    entries = EntryDB(config.database.path, person_id=config.database.person_id)
    try:
        service = DrinkLogService(drinks, entries)
        if args.date is not None:
            results = service.get_entries_by_date(args.date)
        else:
            results = service.get_entries()
    finally:
        drinks.close()
        entries.close()

    if args.json:
        print(json.dumps([r.as_dict() for r in results], ensure_ascii=False, indent=2))
        return

    if not results:
        print("No entries.")
        return
    for result in results:
        print(f"{format_row(result.entry)} | {_format_estimate(result)}")


def _format_estimate(result: AggregatedEntry) -> str:
    agg = result.aggregate
    if abs(agg.max_drinks - agg.min_drinks) < 0.005:
        return f"{agg.min_drinks:.2f} drinks"
    return f"{agg.min_drinks:.2f}-{agg.max_drinks:.2f} drinks"


def _cmd_parse(config, args) -> None:
    start = DateContext.seed(config.importer.start_date, config.importer.start_time)
    try:
        raw = tokenize_line(args.line)
        context = resolve_date_context(raw.date, start)
        fields = parse_fields(raw)
    except DrinkLogError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        sys.exit(1)

    data = {
        "date": context.date.isoformat(),
        "time": context.time.value,
        "context": list(context.context),
        "quantity": str(fields.quantity),
        "name": fields.drink.name,
        "multiplier": fields.drink.multiplier,
        "abv": str(fields.drink.abv) if fields.drink.abv else None,
        "volume": str(fields.volume) if fields.volume else None,
        "volume_ml": str(fields.volume.volume_ml) if fields.volume else None,
    }
    print(json.dumps(data, ensure_ascii=False, indent=2))
