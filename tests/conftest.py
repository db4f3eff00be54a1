import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import roster_grader
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Common test fixtures
@pytest.fixture
def sample_lines() -> list[str]:
    """Header plus three students: mean 70, population stddev sqrt(800/3)."""
    return ["Name,Marks", "Alice,90", "Bob,70", "Carol,50"]


@pytest.fixture
def roster_file(tmp_path: Path, sample_lines) -> Path:
    """Write the sample roster to disk."""
    path = tmp_path / "roster.csv"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
