#!/usr/bin/env python
"""
compose.py – command-line front end for blogcraft.

Quick examples
--------------

# 1) Slug for a title
blogcraft slug "Hello, World!"

# 2) Word count / reading time for one or more posts
blogcraft stats posts/*.md

# 3) Styled preview page next to the post (or into --out)
blogcraft preview posts/launch.md --style config/style.yaml --escape

# 4) Publish record with an attached image and an embedded video
blogcraft record posts/launch.md --publish --image shots/hero.png \
        --video https://youtu.be/xyz --out outputs/launch.json

# 5) Make characters 6-11 of the body bold
blogcraft format posts/launch.md --start 6 --end 11 --as bold
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from blogcraft.core.file_loaders import load_post
from blogcraft.core.html_generation import generate_preview_page
from blogcraft.core.markup import FORMATS
from blogcraft.core.media import load_upload
from blogcraft.core.models import Document, StyleSpec
from blogcraft.core.session import EditingSession
from blogcraft.core.slug import derive_slug
from blogcraft.utils.config import load_style, split_front_matter
from blogcraft.utils.io_helpers import read_utf8, write_utf8
from blogcraft.utils.logging_helper import get_logger, set_level
from blogcraft.utils.paths import STYLE_FILE

console = Console()
log = get_logger()


# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────
def resolve_style(style_path: Optional[Path]) -> Optional[StyleSpec]:
    """Explicit --style wins, then config/style.yaml, else the post's own."""
    if style_path is not None:
        return load_style(style_path)
    if STYLE_FILE.exists():
        return load_style(STYLE_FILE)
    return None


def preview_path(post: Path, out: Optional[Path], many: bool) -> Path:
    if out is None:
        return post.with_suffix(".html")
    if many or out.is_dir():
        return out / f"{post.stem}.html"
    return out


# ──────────────────────────────────────────────────────────────────────────────
# Commands
# ──────────────────────────────────────────────────────────────────────────────
def cmd_slug(args: argparse.Namespace) -> None:
    print(derive_slug(args.title))


def cmd_stats(args: argparse.Namespace) -> None:
    table = Table(title="Post statistics")
    table.add_column("Post", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Characters", justify="right")
    table.add_column("Reading time", justify="right")

    for post in args.files:
        metrics = EditingSession(load_post(post)).metrics
        table.add_row(post.name, str(metrics.word_count), str(metrics.char_count),
                      f"{metrics.reading_time_minutes} min")
    console.print(table)


def cmd_preview(args: argparse.Namespace) -> None:
    style = resolve_style(args.style)
    many = len(args.files) > 1
    iterable = tqdm(args.files, desc="Rendering", unit="post") if many else args.files

    for post in iterable:
        document = load_post(post, style=style, repair=args.repair)
        dest = preview_path(post, args.out, many)
        write_utf8(dest, generate_preview_page(document, escape=args.escape))
        log.info(f"{post.name}: preview written to {dest}")


def cmd_record(args: argparse.Namespace) -> None:
    session = EditingSession(load_post(args.file, style=resolve_style(args.style)))

    for image in args.image:
        if session.attach_image(load_upload(image)) is None:
            log.warning(f"Skipped {image.name}: not an image")
    for url in args.video:
        session.embed_video(url)
    if args.thumbnail and not session.set_thumbnail(load_upload(args.thumbnail)):
        log.warning(f"Skipped thumbnail {args.thumbnail.name}: not an image")

    record = session.publish() if args.publish else session.save_draft()
    payload = json.dumps(record, ensure_ascii=False, indent=2)
    if args.out:
        write_utf8(args.out, payload + "\n")
        log.info(f"Record written to {args.out}")
    else:
        print(payload)


def cmd_format(args: argparse.Namespace) -> None:
    raw = read_utf8(args.file)
    _, body = split_front_matter(raw)
    header = raw[:len(raw) - len(body)]

    session = EditingSession(Document(body=body))
    session.select(args.start, args.end)
    session.apply_format(args.fmt)
    updated = header + session.document.body

    if args.dry_run:
        print(updated)
    else:
        write_utf8(args.file, updated)
        log.info(f"Applied {args.fmt} to {args.file.name} [{args.start}:{args.end}]")


# ──────────────────────────────────────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blogcraft", description="Compose and preview blog posts.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("slug", help="Print the slug derived from a title.")
    p.add_argument("title")
    p.set_defaults(func=cmd_slug)

    p = sub.add_parser("stats", help="Word count, characters and reading time.")
    p.add_argument("files", type=Path, nargs="+")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("preview", help="Write a styled HTML preview page.")
    p.add_argument("files", type=Path, nargs="+")
    p.add_argument("--out", type=Path,
                   help="Output file, or folder when several posts are given.")
    p.add_argument("--style", type=Path, help="YAML style file.")
    p.add_argument("--escape", action="store_true",
                   help="Escape raw HTML in the body before rendering.")
    p.add_argument("--repair", action="store_true",
                   help="Fix mojibake in the post text (ftfy) before rendering.")
    p.set_defaults(func=cmd_preview)

    p = sub.add_parser("record", help="Build the draft / publish record as JSON.")
    p.add_argument("file", type=Path)
    p.add_argument("--publish", action="store_true", help="Build a publish record.")
    p.add_argument("--image", type=Path, action="append", default=[],
                   help="Attach an image and reference it at the end of the body.")
    p.add_argument("--video", action="append", default=[],
                   help="Embed a video URL at the end of the body.")
    p.add_argument("--thumbnail", type=Path, help="Thumbnail image.")
    p.add_argument("--style", type=Path, help="YAML style file.")
    p.add_argument("--out", type=Path, help="Write JSON here instead of stdout.")
    p.set_defaults(func=cmd_record)

    p = sub.add_parser("format", help="Apply a toolbar format to a body range.")
    p.add_argument("file", type=Path)
    p.add_argument("--start", type=int, required=True)
    p.add_argument("--end", type=int, required=True)
    p.add_argument("--as", dest="fmt", choices=FORMATS, required=True)
    p.add_argument("--dry-run", action="store_true", help="Print instead of writing back.")
    p.set_defaults(func=cmd_format)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        set_level("DEBUG" if args.verbose else None)
        args.func(args)
    except (FileNotFoundError, ValueError) as exc:
        log.error(str(exc))
        print(f"✖ Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
