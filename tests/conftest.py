"""Shared test fixtures for gbfs-validator.

Provides fixture file access, isolated schema registries and settings.
"""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from gbfs_validator.schema import SchemaRegistry
from gbfs_validator.settings import Settings, get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes in a test stay local to it."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings with safe defaults."""
    return Settings(log_level="DEBUG")


# =============================================================================
# SCHEMAS & FIXTURES
# =============================================================================


@pytest.fixture
def schema_registry() -> SchemaRegistry:
    """Fresh registry over the bundled schemas (no shared compile cache)."""
    return SchemaRegistry()


@pytest.fixture
def load_fixture() -> Callable[[str], bytes]:
    """Return a loader for files under tests/fixtures."""

    def _load(relative_path: str) -> bytes:
        return (FIXTURES_DIR / relative_path).read_bytes()

    return _load


# =============================================================================
# MARKERS
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Validation of fixture files against bundled schemas")
