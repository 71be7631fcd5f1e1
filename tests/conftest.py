import sys
from pathlib import Path

import pytest

# Ensure `src` is on sys.path for tests when the package is not installed editable.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fluent_automapper import automapper  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_automapper():
    automapper.reset()
    yield
    automapper.reset()
