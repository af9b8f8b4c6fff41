"""Shared pytest fixtures and configuration for cahlter tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from cahlter.models import Config, Content
from cahlter.renderer import RenderContext


@pytest.fixture
def write_tree(tmp_path) -> Callable[[dict[str, str]], Path]:
    """Write a tree of files (relative path -> text) under a fresh source directory."""

    def _write(files: dict[str, str], root: Path | None = None) -> Path:
        root = root or tmp_path / "src"
        root.mkdir(parents=True, exist_ok=True)
        for relative, text in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def sample_tree(write_tree) -> Path:
    """A small vault source with a nested chapter."""
    return write_tree(
        {
            "chapter1.md": "# Chapter 1\n\nHello there.",
            "chapter2.md": "> Here is where the fun begins",
            "chapter3/index.md": "# Chapter 3",
            "chapter3/part1.md": "Part one",
            "chapter3/part2.md": "Part two",
        }
    )


@pytest.fixture
def sample_config() -> Config:
    """Config with a title, links and a custom stylesheet."""
    config = Config()
    config.general.title = "Test Vault"
    config.links = [
        {"name": "GitHub", "url": "https://github.com"},
        {"name": "Mastodon", "url": "https://mastodon.social", "icon": "mastodon"},
    ]
    return config


@pytest.fixture
def sample_context(sample_tree, sample_config) -> RenderContext:
    """Render context over the sample tree."""
    content = Content.from_path(sample_tree)
    return RenderContext(content=content, config=sample_config, src_root=sample_tree)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on location."""
    for item in items:
        # Auto-mark integration tests
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        # Auto-mark unit tests
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
