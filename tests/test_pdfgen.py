import pytest

from bibreader.loader import load_bible
from bibreader.pdfgen import export_chapter_pdf, generate_chapter_report, generate_search_report


def test_chapter_report(sample_bible, tmp_path):
    written = generate_chapter_report(tmp_path / "out" / "genesis1", sample_bible, "Genesis", 1)
    assert written == tmp_path / "out" / "genesis1.txt"
    lines = written.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Genesis Chapter 1"
    assert lines[1] == "=" * len("Genesis Chapter 1")
    assert lines[3].startswith("1 In the beginning")
    assert lines[-1].startswith("3 And God said")


def test_chapter_report_missing_chapter(sample_bible, tmp_path):
    written = generate_chapter_report(tmp_path / "missing.pdf", sample_bible, "Genesis", 50)
    assert written.suffix == ".txt"
    assert "Chapter not found" in written.read_text(encoding="utf-8")


def test_search_report(sample_bible, tmp_path):
    written = generate_search_report(tmp_path / "light", "light", sample_bible.search("light"))
    text = written.read_text(encoding="utf-8")
    assert "Found 2 results:" in text
    assert "Genesis 1:3 - " in text
    assert "John 1:5 - " in text


def test_export_chapter_pdf(sample_bible, tmp_path, capsys):
    out = export_chapter_pdf(sample_bible, "John", 3, tmp_path / "pdf" / "john3.pdf")
    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")
    assert capsys.readouterr().out == f"[ok] PDF exported: {out}\n"


def test_reports_print_ok(sample_bible, tmp_path, capsys):
    chapter = generate_chapter_report(tmp_path / "gen1", sample_bible, "Genesis", 1)
    search = generate_search_report(tmp_path / "light", "light", sample_bible.search("light"))
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"[ok] Wrote CHAPTER REPORT to: {chapter}",
        f"[ok] Wrote SEARCH REPORT to: {search}",
    ]


def test_export_escapes_markup(testament_dirs, book_writer, tmp_path):
    old, new = testament_dirs
    book_writer(old, "Proverbs", "1:1 a <b>fool</b> & his money\n")
    bible = load_bible(old, new)
    out = export_chapter_pdf(bible, "Proverbs", 1, tmp_path / "prov.pdf")
    assert out.read_bytes().startswith(b"%PDF")


def test_export_missing_or_empty_chapter(sample_bible, tmp_path):
    with pytest.raises(LookupError):
        export_chapter_pdf(sample_bible, "Genesis", 9, tmp_path / "x.pdf")
    # John 2 is a gap-filling placeholder with no verses.
    with pytest.raises(LookupError):
        export_chapter_pdf(sample_bible, "John", 2, tmp_path / "y.pdf")
    assert not (tmp_path / "x.pdf").exists()
