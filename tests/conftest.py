"""Shared fixtures for Locator Forge tests."""

import pytest

from locator_forge.analyzer.html_parser import HTMLParser
from locator_forge.config import GenerationConfig, LocatorForgeConfig
from locator_forge.engine import LocatorEngine

MARKER = "data-locator-target"


@pytest.fixture
def config() -> LocatorForgeConfig:
    """Default configuration, independent of the environment."""
    return LocatorForgeConfig()


@pytest.fixture
def generation(config: LocatorForgeConfig) -> GenerationConfig:
    return config.generation


@pytest.fixture
def engine(config: LocatorForgeConfig) -> LocatorEngine:
    return LocatorEngine(config)


@pytest.fixture
def parse():
    """Parse a fragment and return the adapter, honoring the target marker."""

    def _parse(fragment: str) -> HTMLParser:
        return HTMLParser(fragment, target_marker=MARKER)

    return _parse


@pytest.fixture
def target(parse):
    """Parse a fragment and return its target element snapshot."""

    def _target(fragment: str):
        return parse(fragment).target()

    return _target
