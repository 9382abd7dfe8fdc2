"""Tests for runex.core.project module."""

from __future__ import annotations

from pathlib import Path

import pytest

from runex.core.project import (
    PROJECT_ROOT_ENV,
    Project,
    detect_project,
    find_project_upward,
    is_maven_project,
)
from runex.core.result import Err, Ok


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    root = tmp_path / "checkout"
    (root / "streaming-mqtt" / "examples").mkdir(parents=True)
    (root / "pom.xml").write_text("<project/>")
    (root / "streaming-mqtt" / "pom.xml").write_text("<project/>")
    return root


class TestProject:
    def test_maven_wrapper(self, tmp_path: Path) -> None:
        assert Project(root=tmp_path).maven_wrapper == tmp_path / "build" / "mvn"


class TestFindProjectUpward:
    def test_is_maven_project(self, checkout: Path) -> None:
        assert is_maven_project(checkout) is True
        assert is_maven_project(checkout / "streaming-mqtt" / "examples") is False

    def test_from_module_finds_top_most_pom(self, checkout: Path) -> None:
        assert find_project_upward(checkout / "streaming-mqtt") == checkout

    def test_from_nested_dir(self, checkout: Path) -> None:
        assert find_project_upward(checkout / "streaming-mqtt" / "examples") == checkout

    def test_stops_at_gap(self, tmp_path: Path) -> None:
        outer = tmp_path / "outer"
        inner = outer / "gap" / "inner"
        (inner / "module").mkdir(parents=True)
        for d in (outer, inner, inner / "module"):
            (d / "pom.xml").write_text("<project/>")

        assert find_project_upward(inner / "module") == inner

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_project_upward(tmp_path) is None


class TestDetectProject:
    def test_explicit_wins(self, checkout: Path, tmp_path: Path) -> None:
        result = detect_project(
            explicit=checkout,
            start_dir=tmp_path,
            environ={PROJECT_ROOT_ENV: str(tmp_path)},
        )
        assert result == Ok(Project(root=checkout.resolve()))

    def test_explicit_not_a_directory(self, tmp_path: Path) -> None:
        result = detect_project(explicit=tmp_path / "missing", environ={})
        assert isinstance(result, Err)
        assert "--project" in result.error.message

    def test_env_var(self, checkout: Path, tmp_path: Path) -> None:
        result = detect_project(start_dir=tmp_path, environ={PROJECT_ROOT_ENV: str(checkout)})
        assert result == Ok(Project(root=checkout.resolve()))

    def test_env_var_invalid(self, tmp_path: Path) -> None:
        result = detect_project(environ={PROJECT_ROOT_ENV: str(tmp_path / "missing")})
        assert isinstance(result, Err)
        assert PROJECT_ROOT_ENV in result.error.message

    def test_search_upward(self, checkout: Path) -> None:
        result = detect_project(start_dir=checkout / "streaming-mqtt" / "examples", environ={})
        assert result == Ok(Project(root=checkout.resolve()))

    def test_not_found(self, tmp_path: Path) -> None:
        result = detect_project(start_dir=tmp_path, environ={})
        assert isinstance(result, Err)
        assert result.error.searched_from == tmp_path.resolve()
