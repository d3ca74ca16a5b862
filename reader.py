#!/usr/bin/env python
"""
reader.py – command line Bible reader

Commands:

  python reader.py books
      List the loaded books in canonical order

  python reader.py chapter Genesis 1
      Print a whole chapter

  python reader.py verse John 3 16
      Print a single verse

  python reader.py passage "John 3:16-18"
      Print a verse range

  python reader.py search "living water"
      Case-insensitive search across every verse

  python reader.py status
      Book/chapter/verse counts per testament

  python reader.py report-chapter Genesis 1 [--out reports/genesis1]
  python reader.py report-search "light" [--out reports/light]
  python reader.py pdf-chapter Genesis 1 [--out reports/genesis1.pdf]
      Write text / PDF reports

Use --old and --new to point at the testament directories.
"""

import argparse
import sys
from pathlib import Path

from bibreader import config
from bibreader.paths import OLD_TESTAMENT_DIR, NEW_TESTAMENT_DIR, REPORTS_DIR, ensure_basic_dirs
from bibreader.util import warn, error
from bibreader.loader import load_bible
from bibreader.model import Bible
from bibreader.search import format_chapter, format_verse, get_passage, print_search_results, print_book_order
from bibreader.status import print_status
from bibreader.pdfgen import generate_chapter_report, generate_search_report, export_chapter_pdf


def _load(args: argparse.Namespace) -> Bible:
    """
    Load the Bible from the directories given on the command line.

    Exits with status 1 if either directory (or a book file) cannot be read.
    """
    try:
        return load_bible(Path(args.old), Path(args.new))
    except OSError as e:
        error(f"Error loading Bible: {e}")
        sys.exit(1)


def _report_path(args: argparse.Namespace, default_name: str) -> Path:
    if args.out:
        return Path(args.out)
    ensure_basic_dirs()
    return REPORTS_DIR / default_name


# ---------- Command handlers ----------


def cmd_books(args: argparse.Namespace) -> None:
    bible = _load(args)
    print_book_order(bible)


def cmd_chapter(args: argparse.Namespace) -> None:
    """
    Print a chapter the way the reader window shows it.
    """
    bible = _load(args)
    print(f"{args.book} Chapter {args.chapter}")
    print()
    print(format_chapter(bible.get_chapter(args.book, args.chapter)), end="")


def cmd_verse(args: argparse.Namespace) -> None:
    bible = _load(args)
    verse = bible.get_verse(args.book, args.chapter, args.verse)
    if verse is None:
        warn(f"Verse not found: {args.book} {args.chapter}:{args.verse}")
        return
    print(format_verse(verse))


def cmd_passage(args: argparse.Namespace) -> None:
    """
    Extract a passage by reference.
    """
    bible = _load(args)
    print_search_results(get_passage(bible, args.ref))


def cmd_search(args: argparse.Namespace) -> None:
    bible = _load(args)
    print_search_results(bible.search(args.query))


def cmd_status(args: argparse.Namespace) -> None:
    bible = _load(args)
    print_status(bible, Path(args.old), Path(args.new))


def cmd_report_chapter(args: argparse.Namespace) -> None:
    bible = _load(args)
    out = _report_path(args, f"{args.book}_{args.chapter}")
    generate_chapter_report(out, bible, args.book, args.chapter)


def cmd_report_search(args: argparse.Namespace) -> None:
    bible = _load(args)
    out = _report_path(args, "search")
    generate_search_report(out, args.query, bible.search(args.query))


def cmd_pdf_chapter(args: argparse.Namespace) -> None:
    """
    Export a chapter to PDF; exits with status 1 if there is nothing to export.
    """
    bible = _load(args)
    out = _report_path(args, f"{args.book}_{args.chapter}.pdf")
    try:
        export_chapter_pdf(bible, args.book, args.chapter, out)
    except LookupError as e:
        error(str(e))
        sys.exit(1)


# ---------- Parser setup ----------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bible-reader",
        description=f"{config.APP_NAME} CLI (v{config.__version__})",
    )
    parser.add_argument(
        "--old",
        type=str,
        default=str(OLD_TESTAMENT_DIR),
        help="Directory of Old Testament book files (default: old_testament/ at project root)",
    )
    parser.add_argument(
        "--new",
        type=str,
        default=str(NEW_TESTAMENT_DIR),
        help="Directory of New Testament book files (default: new_testament/ at project root)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # books
    p_books = sub.add_parser("books", help="List books in canonical order")
    p_books.set_defaults(func=cmd_books)

    # chapter
    p_chapter = sub.add_parser("chapter", help="Print a whole chapter")
    p_chapter.add_argument("book", type=str, help="Book name, e.g. 'Genesis' or '1John'")
    p_chapter.add_argument("chapter", type=int, help="Chapter number")
    p_chapter.set_defaults(func=cmd_chapter)

    # verse
    p_verse = sub.add_parser("verse", help="Print a single verse")
    p_verse.add_argument("book", type=str, help="Book name")
    p_verse.add_argument("chapter", type=int, help="Chapter number")
    p_verse.add_argument("verse", type=int, help="Verse number")
    p_verse.set_defaults(func=cmd_verse)

    # passage
    p_passage = sub.add_parser("passage", help="Print a passage by reference")
    p_passage.add_argument("ref", type=str, help="Reference string, e.g. 'John 3:16-18'")
    p_passage.set_defaults(func=cmd_passage)

    # search
    p_search = sub.add_parser("search", help="Search every verse for a phrase")
    p_search.add_argument("query", type=str, help="Text to look for (case-insensitive)")
    p_search.set_defaults(func=cmd_search)

    # status
    p_status = sub.add_parser("status", help="Show counts per testament")
    p_status.set_defaults(func=cmd_status)

    # report-chapter
    p_rc = sub.add_parser("report-chapter", help="Write a chapter as a text report")
    p_rc.add_argument("book", type=str, help="Book name")
    p_rc.add_argument("chapter", type=int, help="Chapter number")
    p_rc.add_argument("--out", type=str, default=None, help="Output path (.txt is forced)")
    p_rc.set_defaults(func=cmd_report_chapter)

    # report-search
    p_rs = sub.add_parser("report-search", help="Write search results as a text report")
    p_rs.add_argument("query", type=str, help="Text to look for")
    p_rs.add_argument("--out", type=str, default=None, help="Output path (.txt is forced)")
    p_rs.set_defaults(func=cmd_report_search)

    # pdf-chapter
    p_pdf = sub.add_parser("pdf-chapter", help="Export a chapter as PDF")
    p_pdf.add_argument("book", type=str, help="Book name")
    p_pdf.add_argument("chapter", type=int, help="Chapter number")
    p_pdf.add_argument("--out", type=str, default=None, help="Output PDF path")
    p_pdf.set_defaults(func=cmd_pdf_chapter)

    return parser


# ---------- Main ----------


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
