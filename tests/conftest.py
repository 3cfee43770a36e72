from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def whodat_path() -> Path:
    return DATA_DIR / "WhoDat.lua"
