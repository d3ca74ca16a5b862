"""
Report generation for the Bible reader.

Plain-text reports for a chapter or a set of search results, and a
verse-per-line PDF export of a chapter via ReportLab.
"""

from __future__ import annotations

from pathlib import Path
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from .model import Bible, Verse
from .search import format_chapter, format_verse
from .util import ok


def _write_text_report(output_path: Path, title: str, body: str) -> Path:
    output_path = output_path.with_suffix(".txt")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    content = f"{title}\n{'=' * len(title)}\n\n{body}\n"
    output_path.write_text(content, encoding="utf-8")
    return output_path


def generate_chapter_report(output_path: Path, bible: Bible, book_name: str, chapter_number: int) -> Path:
    """
    Write a chapter as a plain-text report.

    The output is forced to a `.txt` suffix; a missing chapter produces a
    report saying so rather than an error.

    Returns
    -------
    Path
        The file actually written.
    """
    chapter = bible.get_chapter(book_name, chapter_number)
    title = f"{book_name} Chapter {chapter_number}"
    written = _write_text_report(output_path, title, format_chapter(chapter).rstrip("\n"))
    ok(f"Wrote CHAPTER REPORT to: {written}")
    return written


def generate_search_report(output_path: Path, query: str, verses: List[Verse]) -> Path:
    """
    Write search results as a plain-text report (forced `.txt` suffix).
    """
    title = f"Search Report – {query!r}"
    lines: List[str] = [f"Found {len(verses)} results:", ""]
    lines.extend(format_verse(v) for v in verses)
    written = _write_text_report(output_path, title, "\n".join(lines))
    ok(f"Wrote SEARCH REPORT to: {written}")
    return written


def export_chapter_pdf(bible: Bible, book_name: str, chapter_number: int, outfile: Path) -> Path:
    """
    Export a chapter as a verse-per-line PDF.

    Raises
    ------
    LookupError
        If the chapter does not exist or holds no verses.
    """
    chapter = bible.get_chapter(book_name, chapter_number)
    if chapter is None:
        raise LookupError(f"Chapter not found: {book_name} {chapter_number}")
    if not chapter.verses:
        raise LookupError(f"No verses found for {book_name} {chapter_number}")

    styles = getSampleStyleSheet()
    story = []

    title = f"{book_name} {chapter_number} – Verse-per-line"
    story.append(Paragraph(escape(title), styles["Heading1"]))
    story.append(Spacer(1, 12))

    for verse in chapter.verses:
        line = f"<b>{verse.verse_number}</b> {escape(verse.text)}"
        story.append(Paragraph(line, styles["Normal"]))
        story.append(Spacer(1, 4))

    outfile.parent.mkdir(parents=True, exist_ok=True)
    doc = SimpleDocTemplate(str(outfile), pagesize=LETTER)
    doc.build(story)
    ok(f"PDF exported: {outfile}")
    return outfile
