"""
Command-line interface for entrycard.

Usage:
    entrycard render lines.json --output card.svg
    entrycard entry store.json --notepad --watermark contact.json
    entrycard room room.json --data-uri
    entrycard today stores.json
    entrycard version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .cards import build_entry_lines, build_room_lines, build_today_lines
from .engine.layout_options import BACKGROUND_NOTEPAD, LayoutOptions
from .exceptions import EntryCardError, InputError
from .renderers import RenderResult, build_composite_svg, build_watermarked_svg
from .utils.rich_logger import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="entrycard",
        description="entrycard - composite SVG cards for venue entry and room status boards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  entrycard render lines.json -o card.svg
  entrycard entry store.json --notepad -o entry.svg
  entrycard room room.json --data-uri
  entrycard version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Use plain log output instead of rich formatting",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    card_commands = {
        "render": "Render a list of lines (JSON) as an SVG card",
        "entry": "Render a venue's entry board",
        "room": "Render a venue's room status board",
        "today": "Render today's attendance summary",
    }
    for name, help_text in card_commands.items():
        card_parser = subparsers.add_parser(name, help=help_text)
        card_parser.add_argument("input", help="Input JSON file ('-' for stdin)")
        card_parser.add_argument(
            "-o", "--output",
            help="Output file path (default: stdout)",
        )
        card_parser.add_argument(
            "--notepad",
            action="store_true",
            help="Use the notepad background decoration",
        )
        card_parser.add_argument(
            "--watermark",
            help="JSON file with watermark (contact/QR) options",
        )
        card_parser.add_argument(
            "--data-uri",
            action="store_true",
            help="Write a base64 data URI instead of the SVG document",
        )

    subparsers.add_parser("version", help="Show version information")

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return create_parser().parse_args(argv)


def load_json(source: str) -> Any:
    """
    Load a JSON document from a file path or stdin (``-``).

    Raises:
        InputError: If the file is missing or does not contain valid JSON
    """
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Cannot read input {source}", details=str(exc)) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"Invalid JSON in {source}", details=str(exc)) from exc


def _require_mapping(data: Any, source: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise InputError(f"Expected a JSON object in {source}", details=type(data).__name__)
    return data


def _render_lines(data: Any, source: str) -> Tuple[Any, Dict[str, Any]]:
    if isinstance(data, list):
        return data, {}
    data = _require_mapping(data, source)
    return data.get("lines", []), data


def _entry_lines(data: Any, source: str) -> Tuple[Any, Dict[str, Any]]:
    data = _require_mapping(data, source)
    store_name = data.get("storeName", data.get("store_name", ""))
    return build_entry_lines(store_name, data.get("entries") or []), data


def _room_lines(data: Any, source: str) -> Tuple[Any, Dict[str, Any]]:
    data = _require_mapping(data, source)
    lines = build_room_lines(
        data.get("storeName", data.get("store_name", "")),
        room_info=data.get("roomInfo", data.get("room_info")),
        wait_info=data.get("waitInfo", data.get("wait_info")),
        room_detail=data.get("roomDetail", data.get("room_detail")),
        updated_at=data.get("updatedAt", data.get("updated_at")),
    )
    return lines, data


def _today_lines(data: Any, source: str) -> Tuple[Any, Dict[str, Any]]:
    if isinstance(data, list):
        return build_today_lines(data), {}
    data = _require_mapping(data, source)
    return build_today_lines(data.get("stores") or [], date_label=data.get("date")), data


LINE_BUILDERS: Dict[str, Callable[[Any, str], Tuple[Any, Dict[str, Any]]]] = {
    "render": _render_lines,
    "entry": _entry_lines,
    "room": _room_lines,
    "today": _today_lines,
}


def render_card(args: argparse.Namespace) -> RenderResult:
    """Build the card described by the parsed arguments."""
    data = load_json(args.input)
    lines, document = LINE_BUILDERS[args.command](data, args.input)

    options = LayoutOptions.from_mapping(document.get("options") or {})
    if args.notepad:
        options = options.with_overrides(background_type=BACKGROUND_NOTEPAD)

    watermark = document.get("watermark")
    if args.watermark:
        watermark = _require_mapping(load_json(args.watermark), args.watermark)

    if watermark:
        return build_watermarked_svg(lines, options, watermark)
    return build_composite_svg(lines, options)


def cmd_card(args: argparse.Namespace) -> int:
    """Handle render/entry/room/today commands."""
    result = render_card(args)
    payload = result.to_data_uri() if args.data_uri else result.svg

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
        logger.info("Saved %s (%dx%d)", output_path, result.width, result.height)
    else:
        sys.stdout.write(payload)
        sys.stdout.write("\n")
    return 0


def cmd_version(args: Optional[argparse.Namespace] = None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"entrycard v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, use_rich=not args.plain_logs)

    if args.command == "version":
        return cmd_version(args)
    if args.command in LINE_BUILDERS:
        try:
            return cmd_card(args)
        except EntryCardError as exc:
            logger.error("%s", exc)
            return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
