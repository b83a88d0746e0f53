from pathlib import Path

import pytest

from xcstrings_android.parse import Parsed, parse_from_bytes

RESOURCES_DIR = Path(__file__).parent / "resources"


@pytest.fixture
def resources_dir() -> Path:
    return RESOURCES_DIR


@pytest.fixture
def sample_path(resources_dir: Path) -> Path:
    return resources_dir / "Localizable.xcstrings"


@pytest.fixture
def sample_bytes(sample_path: Path) -> bytes:
    return sample_path.read_bytes()


@pytest.fixture
def parsed(sample_bytes: bytes) -> Parsed:
    return parse_from_bytes(sample_bytes)
