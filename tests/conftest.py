from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path):
    """Create files under tmp_path from a {relative_path: bytes} mapping."""

    def _make(files: dict) -> Path:
        root = tmp_path / "static"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        return root

    return _make
