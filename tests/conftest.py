import sys
from pathlib import Path

import pytest

# Allow importing config/core/utils/webapp from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


def fake_static(folder, options):
    return (folder, options)


@pytest.fixture
def static_mw():
    return fake_static


@pytest.fixture
def make_resource_dir(tmp_path: Path):
    """Create <tmp>/<name> with the given files ({relative path: text})."""

    def _make(name: str, files: dict) -> Path:
        root = tmp_path / name
        for rel, text in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        root.mkdir(parents=True, exist_ok=True)
        return root

    return _make
