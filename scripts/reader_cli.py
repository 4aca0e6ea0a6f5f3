#!/usr/bin/env python3
"""Command line utilities for previewing slides and reading positions."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

sys.path.append(".")

from pydantic import ValidationError
from rich.table import Table
from rich.text import Text

from scripts._console_utils import (
    get_console,
    get_err_console,
    progress_bar,
    status_label,
)
from swipereader.configs.config import config
from swipereader.configs.logging_config import setup_logging
from swipereader.reader.progress import calculate_progress, find_position_from_progress
from swipereader.reader.session import ReadingSession
from swipereader.reader.window import SlidingWindowHelper
from swipereader.schemas.reading import ChapterText, ChunkConfig, WindowConfig
from swipereader.storage import LocalProgressStore
from swipereader.text.chunker import SlideChunker

CHAPTER_HEADING_RE = re.compile(r"^(?:Chapter|CHAPTER)\s+\S+[^\n]*$", re.M)

console = get_console()
err_console = get_err_console()


def split_chapters(text: str, book_id: str) -> list[ChapterText]:
    """Split plain text on ``Chapter N`` heading lines.

    Text before the first heading becomes its own chapter when it has any
    words. Text without headings is a single chapter.
    """
    headings = list(CHAPTER_HEADING_RE.finditer(text))
    if not headings:
        return [ChapterText.from_text(book_id, 0, text, title=book_id)]

    parts: list[tuple[str, str]] = []
    preface = text[: headings[0].start()]
    if preface.strip():
        parts.append(("Preface", preface))
    for index, heading in enumerate(headings):
        end = headings[index + 1].start() if index + 1 < len(headings) else len(text)
        parts.append((heading.group(0).strip(), text[heading.end() : end]))

    return [
        ChapterText.from_text(book_id, index, body, title=title)
        for index, (title, body) in enumerate(parts)
    ]


def _read_text(path: str) -> str:
    source = Path(path).expanduser()
    if not source.is_file():
        err_console.print(f"[bold red]File '{source}' does not exist.[/]")
        sys.exit(1)
    return source.read_text(encoding="utf-8")


def _chunk_config(max_words: int | None) -> ChunkConfig:
    if max_words is None:
        return ChunkConfig()
    if max_words <= 0:
        err_console.print(f"[bold red]--max-words must be positive, got {max_words}.[/]")
        sys.exit(2)
    return ChunkConfig(max_words=max_words)


def cmd_chunk(args: argparse.Namespace) -> None:
    text = _read_text(args.file)
    slides = SlideChunker(_chunk_config(args.max_words)).chunk_slides(text)
    if args.json:
        console.print_json(data=[slide.model_dump() for slide in slides])
        return
    if not slides:
        console.print("[bold yellow]No content to chunk.[/]")
        return
    table = Table(
        title=f"{len(slides)} slide(s)", header_style="bold cyan", show_lines=True
    )
    table.add_column("#", justify="right")
    table.add_column("Words", justify="right")
    table.add_column("Text", style="white")
    for index, slide in enumerate(slides):
        table.add_row(str(index), str(slide.word_count), slide.text)
    console.print(table)


def cmd_window(args: argparse.Namespace) -> None:
    chapters = split_chapters(_read_text(args.file), Path(args.file).stem)
    if not 0 <= args.chapter < len(chapters):
        err_console.print(
            f"[bold red]Chapter {args.chapter} not found "
            f"({len(chapters)} chapter(s)).[/]"
        )
        sys.exit(1)

    helper = SlidingWindowHelper()
    window = helper.compute_window(
        chapters[args.chapter],
        args.offset,
        _chunk_config(args.max_words),
        WindowConfig(prev_count=args.prev, next_count=args.next),
    )
    if args.json:
        console.print_json(data=window.model_dump())
        return
    if window.is_empty:
        console.print("[bold yellow]Chapter has no content.[/]")
        return

    console.print(
        f"[bold cyan]Chapter {window.chapter_index}[/] words "
        f"{window.start_word_offset}-{window.end_word_offset}, "
        f"shift: {helper.needs_shifting(window) or 'none'}"
    )
    for index, slide in enumerate(window.slides):
        start = helper.get_offset_at_slide_index(window, index)
        if index == window.current_index:
            label = status_label("CURRENT", "bold green")
        else:
            label = status_label(f"{index:>7}", "dim")
        console.print(
            Text.assemble(label, Text(f" @{start} ", style="cyan"), Text(slide))
        )


def cmd_progress(args: argparse.Namespace) -> None:
    try:
        chapters = [
            ChapterText(book_id="cli", chapter_index=index, word_count=words)
            for index, words in enumerate(args.words)
        ]
    except ValidationError:
        err_console.print(
            f"[bold red]--words must be non-negative counts, got {args.words}.[/]"
        )
        sys.exit(2)
    if args.percent is not None:
        position = find_position_from_progress(chapters, args.percent)
        if args.json:
            console.print_json(data=position.model_dump())
            return
        console.print(
            f"[bold cyan]Chapter[/] {position.chapter_index} "
            f"[bold cyan]word offset[/] {position.word_offset}"
        )
        return

    percent = calculate_progress(chapters, args.chapter, args.offset)
    if args.json:
        console.print_json(data={"percent": percent})
        return
    console.print(progress_bar(percent))


def cmd_read(args: argparse.Namespace) -> None:
    book_id = args.book_id or Path(args.file).stem
    chapters = split_chapters(_read_text(args.file), book_id)
    store = LocalProgressStore(args.store or config.progress_store_path)
    session = ReadingSession(book_id, chapters, store)

    if args.max_words is not None:
        try:
            session.set_chunk_config(args.max_words)
        except ValueError as exc:
            err_console.print(f"[bold red]{exc}[/]")
            sys.exit(2)

    step = session.previous_slide if args.back else session.next_slide
    for _ in range(args.steps):
        if not step():
            console.print("[bold yellow]Reached the edge of the book.[/]")
            break

    slide = session.current_slide
    position = session.position
    console.print(
        f"[bold cyan]{session.chapter.title or book_id}[/] "
        f"(chapter {position.chapter_index}, word {position.word_offset})"
    )
    console.print(Text(slide or "(empty chapter)", style="white"))
    console.print(progress_bar(session.progress_percent))
    session.close()


def build_parser() -> argparse.ArgumentParser:
    low, high = config.slide_words_range
    parser = argparse.ArgumentParser(
        description="SwipeReader slide and position tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  python scripts/reader_cli.py chunk book.txt --max-words 40
  python scripts/reader_cli.py window book.txt --chapter 2 --offset 150
  python scripts/reader_cli.py progress --words 100 100 --chapter 1 --offset 50
  python scripts/reader_cli.py progress --words 100 100 --percent 75
  python scripts/reader_cli.py read book.txt --steps 3

Slide sizes for 'read' must lie in {low}-{high} words
(steps of {config.slide_words_step}).
        """,
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command")

    chunk_parser = sub.add_parser("chunk", help="Split a text file into slides")
    chunk_parser.add_argument("file", help="Plain text file")
    chunk_parser.add_argument("--max-words", type=int, help="Words per slide")
    chunk_parser.add_argument("--json", action="store_true", help="Output JSON")
    chunk_parser.set_defaults(func=cmd_chunk)

    window_parser = sub.add_parser(
        "window", help="Show the slide window around a word offset"
    )
    window_parser.add_argument("file", help="Plain text file")
    window_parser.add_argument("--chapter", type=int, default=0)
    window_parser.add_argument("--offset", type=int, default=0, help="Word offset")
    window_parser.add_argument("--max-words", type=int, help="Words per slide")
    window_parser.add_argument("--prev", type=int, default=config.window_prev_count)
    window_parser.add_argument("--next", type=int, default=config.window_next_count)
    window_parser.add_argument("--json", action="store_true", help="Output JSON")
    window_parser.set_defaults(func=cmd_window)

    progress_parser = sub.add_parser(
        "progress", help="Translate between positions and book percentage"
    )
    progress_parser.add_argument(
        "--words", type=int, nargs="+", required=True, help="Word count per chapter"
    )
    progress_parser.add_argument("--chapter", type=int, default=0)
    progress_parser.add_argument("--offset", type=int, default=0)
    progress_parser.add_argument(
        "--percent", type=float, help="Find the position for this percentage"
    )
    progress_parser.add_argument("--json", action="store_true", help="Output JSON")
    progress_parser.set_defaults(func=cmd_progress)

    read_parser = sub.add_parser(
        "read", help="Step through a book, saving the position between runs"
    )
    read_parser.add_argument("file", help="Plain text file")
    read_parser.add_argument("--book-id", help="Book identifier (default: file stem)")
    read_parser.add_argument("--store", help="Progress store JSON path")
    read_parser.add_argument("--steps", type=int, default=1)
    read_parser.add_argument("--back", action="store_true", help="Step backwards")
    read_parser.add_argument("--max-words", type=int, help="Change the slide size")
    read_parser.set_defaults(func=cmd_read)

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    if not getattr(args, "command", None):
        parser.print_help()
        return
    setup_logging(log_level=args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
