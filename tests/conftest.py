"""Shared fixtures for mdl-render tests."""

import json
from pathlib import Path

import pytest


def view_record(key, title="", description="", version="", mermaid=""):
    """Build a view descriptor dict as the generation step writes it."""
    return {
        "Key": key,
        "Title": title,
        "Description": description,
        "Version": version,
        "Mermaid": mermaid,
    }


def write_view(directory: Path, name: str, record) -> Path:
    """Write a descriptor (dict or raw text) to directory/name."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    text = record if isinstance(record, str) else json.dumps(record)
    path.write_text(text, encoding="utf-8")
    return path


class FakeGenerator:
    """Generation step stand-in that writes preset files and records calls."""

    def __init__(self, files=None):
        self.files = files or {}
        self.calls = []

    def __call__(self, package, out_dir, debug=False):
        self.calls.append((package, Path(out_dir), debug))
        for name, record in self.files.items():
            write_view(Path(out_dir), name, record)


@pytest.fixture
def out_dir(tmp_path):
    """Output directory the generator writes into."""
    return tmp_path / "gendesign"


@pytest.fixture
def sample_views():
    """Two independent views, as written by the generation step."""
    return {
        "context.json": view_record(
            "SystemContext",
            title="System Context",
            description="The system and its users",
            version="1.0",
            mermaid="graph TD; User-->System;",
        ),
        "containers.json": view_record(
            "Containers",
            title="Containers",
            description="Deployable units",
            version="1.0",
            mermaid="graph LR; Web-->API; API-->DB;",
        ),
    }
