# Ensure the src directory is in sys.path for test discovery and imports
import sys
import os

src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if src_path not in sys.path:
    sys.path.insert(0, src_path)

import logging
import uuid
from pathlib import Path
from typing import Generator

import pytest
from dotenv import load_dotenv

from storage.drivers.file_driver import FileDriver

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def load_test_env():
    """
    Automatically load .env.test for all tests in this session.
    """
    env_path = Path(__file__).parent.parent / ".env.test"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=True)
    else:
        logger.debug(f".env.test file not found at {env_path}")


@pytest.fixture
def clean_store_env(monkeypatch):
    """Clears STORE_* variables so settings tests only see what they set."""
    for key in list(os.environ.keys()):
        if key.startswith("STORE_") or key == "LOG_LEVEL":
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture(scope="function")
def base_dir(tmp_path) -> Path:
    """A unique, empty base directory for a single test."""
    root = tmp_path / f"run_{uuid.uuid4().hex[:8]}"
    root.mkdir(parents=True)
    return root


@pytest.fixture(scope="function")
def file_driver(base_dir: Path) -> Generator[FileDriver, None, None]:
    """FileDriver rooted in a throwaway directory."""
    yield FileDriver(base_path=str(base_dir))
