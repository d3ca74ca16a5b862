"""
Bible loading logic for the Bible reader.

This module:
- Enumerates the Old and New Testament directories (one file per book).
- Parses each line of the form 'chapter:verse text' into Verse records.
- Builds the Book/Chapter structure, filling chapter gaps with placeholders.
- Sorts the books into canonical order.

Bad lines are reported on stderr and skipped; only directory/file access
failures abort a load.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from .canon import canon_rank
from .config import IGNORED_FILE_NAMES
from .model import Bible, Book, Chapter, Testament, Verse
from .util import error, warn

# Locator numbers are unsigned 32-bit; anything else parses as 0.
MAX_LOCATOR_NUMBER = 2**32 - 1


def _parse_number(value: str) -> int:
    """
    Parse a chapter or verse number, returning 0 if it is not a plain
    non-negative decimal integer (optionally prefixed by one '+') within range.
    """
    if value.startswith("+"):
        value = value[1:]
    if not value.isascii() or not value.isdigit():
        return 0
    num = int(value)
    if num > MAX_LOCATOR_NUMBER:
        return 0
    return num


def parse_verse_line(line: str) -> Optional[Tuple[int, int, str]]:
    """
    Split a record line into (chapter, verse, text).

    The locator is everything before the first space and must contain a ':'.
    Text is everything after the first space, verbatim.

    Returns None if the line does not have the '<c>:<v> <text>' shape.
    """
    if " " not in line:
        return None
    locator, text = line.split(" ", 1)
    if ":" not in locator:
        return None
    chapter_str, verse_str = locator.split(":", 1)
    return _parse_number(chapter_str), _parse_number(verse_str), text


def _add_verse(book: Book, chapter_num: int, verse_num: int, text: str) -> None:
    # Ensure we have enough chapters
    while len(book.chapters) < chapter_num:
        book.chapters.append(Chapter(number=len(book.chapters) + 1))

    book.chapters[chapter_num - 1].verses.append(
        Verse(book=book.name, chapter=chapter_num, verse_number=verse_num, text=text)
    )


def _strip_newline(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def parse_book_file(file_path: Path, book_name: str, testament: Testament) -> Book:
    """
    Read one book file into a Book.

    Parameters
    ----------
    file_path:
        Path to the book's text file.
    book_name:
        Name of the book (normally the file stem).
    testament:
        Testament the book belongs to.

    Raises
    ------
    OSError
        If the file cannot be opened.
    """
    try:
        fh = open(file_path, "rb")
    except OSError as e:
        error(f"Error opening file {file_path}: {e}")
        raise

    book = Book(name=book_name, testament=testament)

    # Lines are decoded one at a time so a single bad byte sequence only
    # costs that line.
    with fh:
        for line_no, raw in enumerate(fh, start=1):
            try:
                line = _strip_newline(raw).decode("utf-8")
            except UnicodeDecodeError as e:
                warn(f"Error reading line {line_no} in {file_path}: {e}")
                continue

            if not line.strip():
                continue

            parsed = parse_verse_line(line)
            if parsed is None:
                warn(f"Malformed verse at line {line_no} in {file_path}: {line!r}")
                continue

            chapter_num, verse_num, text = parsed
            if chapter_num == 0:
                warn(f"Invalid chapter number at line {line_no} in {file_path}: {line!r}")
                continue

            _add_verse(book, chapter_num, verse_num, text)

    return book


def read_testament_books(testament_path: Path, testament: Testament) -> List[Book]:
    """
    Parse every book file directly inside testament_path.

    Entries that are not regular files, and bookkeeping files such as
    '.DS_Store', are skipped. Books are returned in directory enumeration
    order.

    Raises
    ------
    OSError
        If the directory cannot be listed or a book file cannot be opened.
    """
    books: List[Book] = []
    for entry in Path(testament_path).iterdir():
        if entry.name in IGNORED_FILE_NAMES:
            continue
        if not entry.is_file():
            continue
        books.append(parse_book_file(entry, entry.stem, testament))
    return books


def sort_canonical(books: List[Book]) -> List[Book]:
    """
    Sort books into canonical order. Unknown books go last and keep their
    relative order.
    """
    return sorted(books, key=lambda b: canon_rank(b.name))


def load_bible(old_testament_path: Path, new_testament_path: Path) -> Bible:
    """
    Load the whole Bible from the two testament directories.

    Parameters
    ----------
    old_testament_path:
        Directory holding one text file per Old Testament book.
    new_testament_path:
        Directory holding one text file per New Testament book.

    Returns
    -------
    Bible
        Fully populated, books in canonical order.

    Raises
    ------
    OSError
        If either directory cannot be listed or a book file cannot be opened.
    """
    books: List[Book] = []
    books.extend(read_testament_books(old_testament_path, Testament.OLD))
    books.extend(read_testament_books(new_testament_path, Testament.NEW))
    return Bible(books=sort_canonical(books))
