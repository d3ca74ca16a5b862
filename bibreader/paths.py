"""
Path configuration for the Bible reader.
"""

from pathlib import Path

# Project root is one level up from bibreader/
PROJECT_ROOT = Path(__file__).parent.parent
OLD_TESTAMENT_DIR = PROJECT_ROOT / "old_testament"
NEW_TESTAMENT_DIR = PROJECT_ROOT / "new_testament"
REPORTS_DIR = PROJECT_ROOT / "reports"


def ensure_basic_dirs() -> None:
    """
    Ensure the reports/ output directory exists.
    """
    REPORTS_DIR.mkdir(exist_ok=True)
