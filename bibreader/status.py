"""
Status and health-report helpers for the Bible reader.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from .canon import is_canonical
from .model import Bible, Testament
from .util import info, warn


def get_bible_stats(bible: Bible) -> Dict[Testament, Tuple[int, int, int]]:
    """
    Return {testament: (book_count, chapter_count, verse_count)}.
    """
    stats: Dict[Testament, Tuple[int, int, int]] = {}
    for testament in Testament:
        books = bible.books_in(testament)
        stats[testament] = (
            len(books),
            sum(b.chapter_count for b in books),
            sum(b.verse_count for b in books),
        )
    return stats


def get_unknown_books(bible: Bible) -> List[str]:
    """
    Return names of loaded books that are not in the canonical table.
    """
    return [b.name for b in bible.books if not is_canonical(b.name)]


def print_status(bible: Bible, old_testament_path: Path, new_testament_path: Path) -> None:
    """
    Print a human-readable status report:

    - Source directories
    - Book/chapter/verse counts per testament
    - Books that fell outside the canonical order
    """
    info(f"Old Testament: {old_testament_path}")
    info(f"New Testament: {new_testament_path}")

    if not bible.books:
        warn("No books loaded.")
        return

    info("Counts per testament:")
    for testament, (books, chapters, verses) in get_bible_stats(bible).items():
        print(f"  - {testament.value}: {books} book(s), {chapters} chapter(s), {verses} verse(s)")

    unknown = get_unknown_books(bible)
    if unknown:
        warn("Books not in the canonical order (listed last):")
        for name in unknown:
            print(f"  - {name}")
