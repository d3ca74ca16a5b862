"""
Data model definitions for the Bible reader.

The corpus is a strict tree built once by the loader:

- Bible   : ordered list of books (canonical order)
- Book    : a named work with its testament and a dense list of chapters
- Chapter : chapter number plus verses in file order
- Verse   : a single verse record
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class Testament(Enum):
    __test__ = False  # not a pytest test class

    OLD = "Old"
    NEW = "New"


@dataclass(frozen=True)
class Verse:
    """
    A single verse as read from a book file.

    chapter     : 1..N
    verse_number: as written in the source; not guaranteed unique or contiguous
    """
    book: str
    chapter: int
    verse_number: int
    text: str

    @property
    def ref(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse_number}"


@dataclass
class Chapter:
    number: int
    verses: List[Verse] = field(default_factory=list)

    def get_verse(self, verse_number: int) -> Optional[Verse]:
        """First verse carrying this number, or None."""
        return next((v for v in self.verses if v.verse_number == verse_number), None)


@dataclass
class Book:
    """
    A book of the Bible.

    chapters is dense: chapters[i].number == i + 1. Chapters missing from the
    source file are present as empty placeholders.
    """
    name: str
    testament: Testament
    chapters: List[Chapter] = field(default_factory=list)

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    @property
    def verse_count(self) -> int:
        return sum(len(c.verses) for c in self.chapters)

    def get_chapter(self, number: int) -> Optional[Chapter]:
        return next((c for c in self.chapters if c.number == number), None)


@dataclass
class Bible:
    books: List[Book] = field(default_factory=list)

    def find_book(self, book_name: str) -> Optional[Book]:
        """
        First book whose name matches exactly.

        Duplicate names are possible (e.g. the same file in both testament
        directories); the first one in canonical order wins.
        """
        return next((b for b in self.books if b.name == book_name), None)

    def book_names(self) -> List[str]:
        return [b.name for b in self.books]

    def books_in(self, testament: Testament) -> List[Book]:
        return [b for b in self.books if b.testament is testament]

    def iter_verses(self) -> Iterator[Verse]:
        """Every verse in traversal order: books, then chapters, then verses."""
        for book in self.books:
            for chapter in book.chapters:
                yield from chapter.verses

    @property
    def verse_count(self) -> int:
        return sum(b.verse_count for b in self.books)

    def get_verse(self, book_name: str, chapter: int, verse: int) -> Optional[Verse]:
        """
        Look up a single verse.

        Books sharing the name are scanned in order until one holds the
        chapter; that chapter alone is searched for the verse. Returns None
        if the book, chapter or verse is not present.
        """
        for book in self.books:
            if book.name != book_name:
                continue
            ch = book.get_chapter(chapter)
            if ch is not None:
                return ch.get_verse(verse)
        return None

    def get_chapter(self, book_name: str, chapter: int) -> Optional[Chapter]:
        """
        Look up a whole chapter; None if the book or chapter is not present.
        """
        book = self.find_book(book_name)
        if book is None:
            return None
        return book.get_chapter(chapter)

    def search(self, query: str) -> List[Verse]:
        """
        Case-insensitive literal substring search over every verse.

        Results are in traversal order with no limit. An empty query matches
        every verse.
        """
        needle = query.lower()
        return [v for v in self.iter_verses() if needle in v.text.lower()]
