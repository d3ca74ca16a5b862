import pytest
from pathlib import Path

from bibreader.loader import load_bible


GENESIS = """1:1 In the beginning God created the heaven and the earth.
1:2 And the earth was without form, and void; and darkness was upon the face of the deep.
1:3 And God said, Let there be light: and there was light.
2:1 Thus the heavens and the earth were finished, and all the host of them.
"""

EXODUS = """1:1 Now these are the names of the children of Israel, which came into Egypt.
"""

JOHN = """1:1 In the beginning was the Word, and the Word was with God, and the Word was God.
1:5 And the light shineth in darkness; and the darkness comprehended it not.
3:16 For God so loved the world, that he gave his only begotten Son.
3:17 For God sent not his Son into the world to condemn the world.
3:18 He that believeth on him is not condemned.
"""


def write_book(directory: Path, name: str, content, suffix=".txt") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}{suffix}"
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_bytes(content.encode("utf-8"))
    return path


@pytest.fixture
def testament_dirs(tmp_path):
    old = tmp_path / "old_testament"
    new = tmp_path / "new_testament"
    old.mkdir()
    new.mkdir()
    return old, new


@pytest.fixture
def sample_dirs(testament_dirs):
    old, new = testament_dirs
    # Exodus first on disk; canonical order must still put Genesis first.
    write_book(old, "Exodus", EXODUS)
    write_book(old, "Genesis", GENESIS)
    write_book(new, "John", JOHN)
    return old, new


@pytest.fixture
def sample_bible(sample_dirs):
    return load_bible(*sample_dirs)


@pytest.fixture
def book_writer():
    return write_book
