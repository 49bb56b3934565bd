"""Shared test fixtures for g2bi tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_lxfml() -> str:
    """Return a small LXFML document with a group hierarchy.

    Group A carries parts x and y; group B has no parts of its own
    and two child groups carrying z and w.
    """
    return """<?xml version="1.0" encoding="UTF-8"?>
<LXFML versionMajor="5" versionMinor="0" name="Sample">
  <Bricks>
    <Brick refID="0" designID="3001"/>
  </Bricks>
  <GroupSystems>
    <GroupSystem>
      <Group transformation="1,0,0" partRefs="x,y"/>
      <Group transformation="1,0,0">
        <Group partRefs="z"/>
        <Group partRefs="w"/>
      </Group>
    </GroupSystem>
  </GroupSystems>
</LXFML>
"""


@pytest.fixture
def lxfml_file(tmp_path: Path, sample_lxfml: str) -> Path:
    """Write the sample LXFML document to a temporary file."""
    path = tmp_path / "design.lxfml"
    path.write_text(sample_lxfml, encoding="utf-8")
    return path
