"""CLI entry point for the ingredients module."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv

from .categories import classify_all
from .config import LarderConfig, load_config
from .db import RecipeIngredientsDB
from .models import ParsedIngredient
from .parser import parse_ingredients_text
from .review import ReviewRow, to_storage_rows

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="larder-ingredients",
        description="Parse free-text recipe ingredients into structured rows",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML config file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Parse ingredient text")
    parse_parser.add_argument(
        "file", nargs="?", default=None, help="Input file (default: stdin)"
    )
    parse_parser.add_argument("--json", action="store_true", help="Output JSON")
    parse_parser.add_argument(
        "--classify", action="store_true", help="Guess ingredient categories"
    )

    # save
    save_parser = sub.add_parser("save", help="Parse and store rows for a recipe")
    save_parser.add_argument("recipe_id", help="Recipe identifier")
    save_parser.add_argument(
        "file", nargs="?", default=None, help="Input file (default: stdin)"
    )
    save_parser.add_argument(
        "--classify", action="store_true", help="Guess ingredient categories"
    )

    # show
    show_parser = sub.add_parser("show", help="Show stored rows for a recipe")
    show_parser.add_argument("recipe_id", help="Recipe identifier")
    show_parser.add_argument("--json", action="store_true", help="Output JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s [%(name)s] %(message)s",
    )
    config = load_config(args.config)

    match args.command:
        case "parse":
            _cmd_parse(config, args)
        case "save":
            _cmd_save(config, args)
        case "show":
            _cmd_show(config, args)


def _read_input(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except OSError as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        sys.exit(1)


def _parse(config: LarderConfig, text: str, classify: bool) -> list[ParsedIngredient]:
    records = parse_ingredients_text(text)
    if classify or config.categories.enabled:
        records = classify_all(
            records,
            keywords=config.categories.keywords,
            default=config.categories.default,
        )
    logger.debug("Parsed %d ingredient lines", len(records))
    return records


def _cmd_parse(config: LarderConfig, args) -> None:
    records = _parse(config, _read_input(args.file), args.classify)

    if args.json:
        print(json.dumps([asdict(r) for r in records], ensure_ascii=False, indent=2))
        return

    if not records:
        print("No ingredient lines found.")
        return

    rows = [ReviewRow.from_parsed(r) for r in records]
    print(format_table(rows, config.review.min_confidence))


def _cmd_save(config: LarderConfig, args) -> None:
    records = _parse(config, _read_input(args.file), args.classify)
    if not records:
        print("No ingredient lines found; nothing saved.", file=sys.stderr)
        sys.exit(1)
    rows = [ReviewRow.from_parsed(r) for r in records]

    try:
        storage_rows = to_storage_rows(args.recipe_id, rows)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    db = RecipeIngredientsDB(config.database.path)
    try:
        count = db.replace_ingredients(args.recipe_id, storage_rows)
    finally:
        db.close()

    flagged = [r for r in rows if r.needs_review(config.review.min_confidence)]
    print(f"Saved {count} ingredient lines for recipe {args.recipe_id}")
    if flagged:
        print(f"  {len(flagged)} line(s) need review:")
        for r in flagged:
            print(f"    {r.line_no:>3}. {r.raw_line}")


def _cmd_show(config: LarderConfig, args) -> None:
    db = RecipeIngredientsDB(config.database.path)
    try:
        stored = db.get_ingredients(args.recipe_id)
    finally:
        db.close()

    if not stored:
        print(f"No ingredients stored for recipe {args.recipe_id}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(stored, ensure_ascii=False, indent=2))
        return

    rows = [
        ReviewRow(**{k: v for k, v in row.items() if k != "recipe_id"})
        for row in stored
    ]
    print(format_table(rows, config.review.min_confidence))


def format_table(rows: list[ReviewRow], min_confidence: float) -> str:
    """Format review rows for terminal display."""
    lines: list[str] = []
    lines.append(
        f"{'#':>3}  {'Qty':<8} {'Unit':<9} {'Item':<28} {'Notes':<20} {'Conf':>5}"
    )
    lines.append(f"{'─' * 78}")
    for r in rows:
        qty = "" if r.quantity is None else f"{r.quantity:g}"
        flag = " !" if r.needs_review(min_confidence) else ""
        lines.append(
            f"{r.line_no:>3}  {qty:<8} {r.unit or '':<9} "
            f"{r.item_name or '':<28} {r.notes or '':<20} "
            f"{r.confidence:>5.0%}{flag}"
        )
        if r.category:
            lines.append(f"{'':>5}[{r.category}]")
    return "\n".join(lines)
