import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# Tests share helpers.py as a plain module
TESTS_PATH = Path(__file__).resolve().parent
if str(TESTS_PATH) not in sys.path:
    sys.path.insert(0, str(TESTS_PATH))


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Each test reads configuration from disk again."""
    from family_tree.config import CONFIG_ENV_VAR, reset_config_cache

    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
