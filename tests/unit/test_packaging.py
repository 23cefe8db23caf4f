"""Checks on declared dependencies."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _project() -> dict:
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)["project"]


class TestDependencies:
    def test_core_does_not_require_fastapi(self):
        assert not any(dep.startswith("fastapi") for dep in _project()["dependencies"])

    def test_uploads_extra_provides_fastapi(self):
        extras = _project()["optional-dependencies"]
        assert any(dep.startswith("fastapi") for dep in extras["uploads"])
