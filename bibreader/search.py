"""
Search output and passage extraction for the Bible reader.

This module provides:

- format_chapter(chapter)
    Chapter text as shown by the reader: "N text" per verse, blank line between

- format_verse(verse)
    One search-result row: "Book C:V - text"

- get_passage(bible, ref)
    Extracts a passage like "John 3:16-18" or "Genesis 1:1"

- print_search_results(verses) / print_book_order(bible)
    Pretty-print to the console
"""

from __future__ import annotations

import re
from typing import List, Optional

from .model import Bible, Chapter, Verse
from .util import info, warn


CHAPTER_NOT_FOUND = "Chapter not found"

# 'Book C:V' or 'Book C:V1-V2'; the book name may contain spaces.
REFERENCE_RE = re.compile(r"^(?P<book>.+?)\s+(?P<chapter>\d+):(?P<start>\d+)(?:-(?P<end>\d+))?$")


def format_chapter(chapter: Optional[Chapter]) -> str:
    if chapter is None:
        return CHAPTER_NOT_FOUND
    return "".join(f"{v.verse_number} {v.text}\n\n" for v in chapter.verses)


def format_verse(verse: Verse) -> str:
    return f"{verse.book} {verse.chapter}:{verse.verse_number} - {verse.text}"


def get_passage(bible: Bible, ref: str) -> List[Verse]:
    """
    Fetch a passage like 'John 3:16-18' or 'Genesis 1:1'.

    Parameters
    ----------
    bible:
        Loaded Bible to read from.
    ref:
        Reference string. The book name must match a loaded book exactly.

    Returns
    -------
    List[Verse]:
        Verses of the chapter whose numbers fall inside the range, in the
        order they are stored. Empty if the reference is invalid or absent.
    """
    m = REFERENCE_RE.match(ref.strip())
    if m is None:
        warn(f"Could not parse reference {ref!r}; expected 'Book C:V' or 'Book C:V1-V2'.")
        return []

    book_str = m.group("book")
    chapter_num = int(m.group("chapter"))
    v_start = int(m.group("start"))
    v_end = int(m.group("end")) if m.group("end") else v_start

    if bible.find_book(book_str) is None:
        warn(f"Unknown book in reference: {book_str!r}")
        return []

    chapter = bible.get_chapter(book_str, chapter_num)
    if chapter is None:
        warn(f"{book_str} has no chapter {chapter_num}.")
        return []

    return [v for v in chapter.verses if v_start <= v.verse_number <= v_end]


def print_search_results(verses: List[Verse]) -> None:
    """
    Pretty-print search or passage results to the console.
    """
    if not verses:
        info("No results.")
        return

    print(f"Found {len(verses)} results:")
    for verse in verses:
        print(format_verse(verse))


def print_book_order(bible: Bible) -> None:
    print("Books in biblical order:")
    for i, name in enumerate(bible.book_names(), start=1):
        print(f"{i:2}. {name}")
