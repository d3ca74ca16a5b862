"""
Canonical (Protestant, 66-book) ordering of the Bible.

Book names match the file stems used in the testament directories,
e.g. '1Samuel', 'SongofSolomon'.
"""

from __future__ import annotations

from typing import Dict, List

from .config import UNKNOWN_RANK


OLD_TESTAMENT_BOOKS: List[str] = [
    "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy",
    "Joshua", "Judges", "Ruth", "1Samuel", "2Samuel",
    "1Kings", "2Kings", "1Chronicles", "2Chronicles",
    "Ezra", "Nehemiah", "Esther", "Job", "Psalms", "Proverbs",
    "Ecclesiastes", "SongofSolomon", "Isaiah", "Jeremiah",
    "Lamentations", "Ezekiel", "Daniel", "Hosea", "Joel", "Amos",
    "Obadiah", "Jonah", "Micah", "Nahum", "Habakkuk", "Zephaniah",
    "Haggai", "Zechariah", "Malachi",
]

NEW_TESTAMENT_BOOKS: List[str] = [
    "Matthew", "Mark", "Luke", "John", "Acts",
    "Romans", "1Corinthians", "2Corinthians", "Galatians", "Ephesians",
    "Philippians", "Colossians", "1Thessalonians", "2Thessalonians",
    "1Timothy", "2Timothy", "Titus", "Philemon", "Hebrews",
    "James", "1Peter", "2Peter", "1John", "2John", "3John",
    "Jude", "Revelation",
]

CANONICAL_BOOKS: List[str] = OLD_TESTAMENT_BOOKS + NEW_TESTAMENT_BOOKS

# name -> 0-based position in the canon; built once at import, read-only after.
BOOK_RANK: Dict[str, int] = {name: idx for idx, name in enumerate(CANONICAL_BOOKS)}


def canon_rank(book_name: str) -> int:
    """
    Return the sort rank of a book name.

    Unknown names get UNKNOWN_RANK so they sort after every canonical book.
    """
    return BOOK_RANK.get(book_name, UNKNOWN_RANK)


def is_canonical(book_name: str) -> bool:
    return book_name in BOOK_RANK
