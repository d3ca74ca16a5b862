"""
Project configuration and versioning for the Bible reader.
"""

APP_NAME = "Bible Reader"
__version__ = "0.1.0"

# Exact, case-sensitive file names skipped when enumerating a testament directory.
IGNORED_FILE_NAMES = frozenset({".DS_Store"})

# Rank given to books missing from the canonical table so they sort last.
UNKNOWN_RANK = 999
