#!/usr/bin/env python3
"""CLI entrypoint for the physician bio builder."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from bio_builder.profile_parser import layout, parser, renderer, sources
from bio_builder.profile_parser.parser import PhysicianRecord

EMPTY_INPUT_MESSAGE = "Please paste the physician's page text first."

logger = logging.getLogger("bio_builder.profile_parser.cli")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def read_input(source: str | None) -> str:
    if not source or source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser().resolve()
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    logger.info("Reading %s", path)
    return sources.read_source(path)


def ensure_text(text: str) -> str:
    if not text or not text.strip():
        raise SystemExit(EMPTY_INPUT_MESSAGE)
    return text


def load_record(args: argparse.Namespace) -> PhysicianRecord:
    text = ensure_text(read_input(getattr(args, "input", None)))
    text = parser.bound_input(text, getattr(args, "max_chars", None))
    return parser.parse_profile_text(text)


def emit(content: str, output: str | None) -> None:
    if not output:
        sys.stdout.write(content)
        return
    path = Path(output).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s (%d characters)", path, len(content))


def command_parse(args: argparse.Namespace) -> None:
    record = load_record(args)
    emit(json.dumps(record.to_dict(), ensure_ascii=False, indent=2) + "\n", args.output)


def command_render(args: argparse.Namespace) -> None:
    record = load_record(args)
    if not record.name:
        logger.warning("No physician name detected; using placeholder")
    emit(renderer.render_preview(record), args.output)


def command_pages(args: argparse.Namespace) -> None:
    page_height = layout.page_height_px(args.width)
    if not page_height:
        raise SystemExit("Page width must be positive.")
    for offset, page in layout.page_guides(args.height, page_height):
        print(f"Page {page} starts at {offset:.1f}px")
    print("Pages:", layout.page_count(args.height, page_height))


def add_input_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "input",
        nargs="?",
        help="Input file (.txt, .html, .docx, .pdf) or '-' for stdin",
    )
    subparser.add_argument("--output", help="Write to this file instead of stdout")
    subparser.add_argument(
        "--max-chars",
        type=int,
        help="Maximum input characters to parse (overrides BIO_MAX_INPUT_CHARS)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser_obj = argparse.ArgumentParser(description="Build physician bios from profile pages")
    parser_obj.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser_obj.add_subparsers(dest="command")

    parse_parser = subparsers.add_parser("parse", help="Extract the profile record as JSON")
    add_input_arguments(parse_parser)
    parse_parser.set_defaults(func=command_parse)

    render_parser = subparsers.add_parser("render", help="Render a Markdown preview")
    add_input_arguments(render_parser)
    render_parser.set_defaults(func=command_render)

    pages_parser = subparsers.add_parser("pages", help="Estimate page breaks for a preview")
    pages_parser.add_argument("--width", type=float, required=True, help="Page width in px")
    pages_parser.add_argument("--height", type=float, required=True, help="Content height in px")
    pages_parser.set_defaults(func=command_pages)

    return parser_obj


def main(argv: list[str] | None = None) -> None:
    parser_obj = build_parser()
    args = parser_obj.parse_args(argv)
    if not getattr(args, "command", None):
        parser_obj.print_help()
        return
    configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
