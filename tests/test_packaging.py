from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parent.parent


def test_project_metadata_does_not_use_design_notes_as_readme():
    with open(ROOT / "pyproject.toml", "rb") as f:
        project = tomllib.load(f)["project"]

    assert project.get("readme") != "DESIGN.md"
    assert "student-db" in project["scripts"]
