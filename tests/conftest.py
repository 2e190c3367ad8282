"""Shared pytest fixtures for the widget test-suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
from bs4 import BeautifulSoup

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from bswidgets.ids import IdGenerator, default_id_generator


@pytest.fixture(autouse=True)
def reset_ids() -> Iterator[IdGenerator]:
    """Reset the process-wide id generator so auto ids start at ``w0``."""

    generator = default_id_generator()
    generator.prefix = "w"
    generator.reset()
    yield generator
    generator.prefix = "w"
    generator.reset()


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Return a callable parsing rendered markup."""

    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")

    return _parse


@pytest.fixture
def nested_menu() -> list:
    """Return a three level menu used by the active-state tests."""

    return [
        {"label": "Home", "url": "/"},
        {
            "label": "Docs",
            "items": [
                {"label": "Guide", "url": "/docs/guide"},
                {
                    "label": "Reference",
                    "items": [
                        {"label": "API", "url": "/docs/api"},
                        {"label": "CLI", "url": "/docs/cli"},
                    ],
                },
            ],
        },
    ]
