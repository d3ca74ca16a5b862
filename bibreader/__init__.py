"""
bibreader - Bible reader core package

This package contains the core functionality for the Bible reader:
- config: Project configuration and versioning
- paths: Default testament directories and report output
- util: Console output helpers
- canon: Canonical 66-book order
- model: Bible / Book / Chapter / Verse and their queries
- loader: Loading the Bible from the testament directories
- search: Result formatting and passage extraction
- status: Corpus statistics
- pdfgen: Text and PDF reports
"""

from . import config
from .paths import PROJECT_ROOT, OLD_TESTAMENT_DIR, NEW_TESTAMENT_DIR, ensure_basic_dirs
from .util import info, warn, ok, error
from .model import Bible, Book, Chapter, Verse, Testament
from .loader import load_bible
from .search import get_passage, print_search_results

__version__ = config.__version__
__all__ = [
    "config",
    "PROJECT_ROOT",
    "OLD_TESTAMENT_DIR",
    "NEW_TESTAMENT_DIR",
    "ensure_basic_dirs",
    "info",
    "warn",
    "ok",
    "error",
    "Bible",
    "Book",
    "Chapter",
    "Verse",
    "Testament",
    "load_bible",
    "get_passage",
    "print_search_results",
]
