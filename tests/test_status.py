from bibreader.model import Bible, Testament
from bibreader.loader import load_bible
from bibreader.status import get_bible_stats, get_unknown_books, print_status


def test_bible_stats(sample_bible):
    stats = get_bible_stats(sample_bible)
    assert stats[Testament.OLD] == (2, 3, 5)
    assert stats[Testament.NEW] == (1, 3, 5)


def test_unknown_books(testament_dirs, book_writer):
    old, new = testament_dirs
    book_writer(old, "Genesis", "1:1 a\n")
    book_writer(old, "Tobit", "1:1 b\n")
    assert get_unknown_books(load_bible(old, new)) == ["Tobit"]


def test_print_status(sample_bible, sample_dirs, capsys):
    print_status(sample_bible, *sample_dirs)
    captured = capsys.readouterr()
    assert "Old: 2 book(s), 3 chapter(s), 5 verse(s)" in captured.out
    assert "New: 1 book(s), 3 chapter(s), 5 verse(s)" in captured.out
    assert "canonical" not in captured.err


def test_print_status_empty(tmp_path, capsys):
    print_status(Bible(), tmp_path, tmp_path)
    assert "No books loaded." in capsys.readouterr().err
