from pathlib import Path

import pytest

RECIPES = """\
Kitchen notes, kept as one multitext file.
==== multitext header ====
Recipes collected over the years.
==== pancakes
2 eggs
250 ml milk

==== bread
500 g flour
==== pancakes
3 eggs
"""


@pytest.fixture(scope="module")
def mt_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("multitext")

    (dir_path / "recipes.mt").write_text(RECIPES, encoding="utf-8")
    (dir_path / "windows.mt").write_bytes(RECIPES.replace("\n", "\r\n").encode())
    (dir_path / "no_header.txt").write_text("just\nsome\ntext\n", encoding="utf-8")
    (dir_path / "empty.mt").write_bytes(b"")
    (dir_path / "mixed.mt").write_bytes(
        b"## multitext header\n## ok\nfine\n\xc3\x28 broken\nstill fine\n"
    )

    return dir_path
