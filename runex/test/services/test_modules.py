"""Tests for runex.services.modules module."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import AKKA_NESTED_CLASS, AKKA_SCALA, MQTT_PY, MQTT_SCALA, touch

from runex.core.config import Config
from runex.core.example import Example, parse_example
from runex.core.result import Err, Ok
from runex.services.errors import ModuleNotFound
from runex.services.modules import (
    Module,
    ProbeMatch,
    probe_compiled_classes,
    probe_package_source,
    probe_source_tree,
    resolve_module,
)

CONFIG = Config()


def _resolve(name: str, root: Path) -> Module:
    result = resolve_module(parse_example(name), root, CONFIG)
    assert isinstance(result, Ok), result
    return result.value


class TestSourceTreeProbe:
    def test_top_level_class(self, project_root: Path) -> None:
        module = _resolve("org.apache.spark.examples.streaming.mqtt.MQTTWordCount", project_root)

        assert module.path == project_root / "streaming-mqtt"
        assert module.name == "streaming-mqtt"
        assert module.source == project_root / MQTT_SCALA
        assert module.probe == "probe_source_tree"

    def test_only_first_probe_runs(self, project_root: Path) -> None:
        def explode(example: Example, root: Path, config: Config) -> ProbeMatch | None:
            raise AssertionError("later probes must not run")

        result = resolve_module(
            parse_example("org.apache.spark.examples.streaming.akka.ActorWordCount"),
            project_root,
            CONFIG,
            probes=(probe_source_tree, explode, explode),
        )

        assert isinstance(result, Ok)
        assert result.value.path == project_root / "streaming-akka"

    def test_script_path(self, project_root: Path) -> None:
        module = _resolve(MQTT_PY, project_root)

        assert module.name == "streaming-mqtt"
        assert module.source == project_root / MQTT_PY

    def test_script_short_name(self, project_root: Path) -> None:
        module = _resolve("streaming/mqtt_wordcount.py", project_root)

        assert module.source == project_root / MQTT_PY

    def test_script_absolute_path(self, project_root: Path) -> None:
        module = _resolve(str(project_root / MQTT_PY), project_root)

        assert module.name == "streaming-mqtt"

    def test_first_match_is_lexical(self, project_root: Path) -> None:
        touch(project_root, "a-dup/examples/src/main/scala/org/dup/Shared.scala")
        touch(project_root, "z-dup/examples/src/main/scala/org/dup/Shared.scala")

        assert _resolve("org.dup.Shared", project_root).name == "a-dup"

    def test_nested_module_name(self, project_root: Path) -> None:
        touch(project_root, "sql-streaming/mqtt/examples/src/main/scala/org/sql/MQTTSource.scala")

        module = _resolve("org.sql.MQTTSource", project_root)

        assert module.name == "sql-streaming/mqtt"
        assert module.artifact_name == "sql-streaming-mqtt"

    def test_hidden_dirs_ignored(self, project_root: Path) -> None:
        touch(project_root, ".git/mod/examples/src/org/hidden/Gone.scala")

        result = resolve_module(parse_example("org.hidden.Gone"), project_root, CONFIG)

        assert isinstance(result, Err)

    def test_probe_directly(self, project_root: Path) -> None:
        example = parse_example("org.apache.spark.examples.streaming.akka.ActorWordCount")

        hit = probe_source_tree(example, project_root, CONFIG)

        assert hit == ProbeMatch(
            module_path=project_root / "streaming-akka", source=project_root / AKKA_SCALA
        )


class TestCompiledClassesProbe:
    def test_nested_class_falls_back_to_target(self, project_root: Path) -> None:
        module = _resolve(
            "org.apache.spark.examples.streaming.akka.ActorWordCount$FeederActor", project_root
        )

        assert module.path == project_root / "streaming-akka"
        assert module.source == project_root / AKKA_NESTED_CLASS
        assert module.probe == "probe_compiled_classes"

    def test_source_probe_misses_nested_class(self, project_root: Path) -> None:
        example = parse_example(
            "org.apache.spark.examples.streaming.akka.ActorWordCount$FeederActor"
        )

        assert probe_source_tree(example, project_root, CONFIG) is None
        assert probe_compiled_classes(example, project_root, CONFIG) is not None

    def test_cuts_at_first_target(self, project_root: Path) -> None:
        touch(project_root, "kudu/target/classes/org/kudu/target/Writer.class")

        assert _resolve("org.kudu.target.Writer", project_root).name == "kudu"


class TestPackageSourceProbe:
    def test_unknown_class_in_known_package(self, project_root: Path) -> None:
        module = _resolve("org.apache.spark.examples.streaming.akka.NotThere", project_root)

        assert module.path == project_root / "streaming-akka"
        assert module.probe == "probe_package_source"

    def test_no_package(self, project_root: Path) -> None:
        assert probe_package_source(parse_example("NotThere"), project_root, CONFIG) is None

    def test_scripts_have_no_package(self, project_root: Path) -> None:
        assert probe_package_source(parse_example("x/nope.py"), project_root, CONFIG) is None


class TestNotFound:
    @pytest.mark.parametrize(
        "name",
        ["org.unknown.Example", "Orphan", "missing/script.py"],
    )
    def test_error(self, project_root: Path, name: str) -> None:
        result = resolve_module(parse_example(name), project_root, CONFIG)

        assert result == Err(ModuleNotFound(example=name))

    def test_file_directly_under_root_marker_is_not_a_module(self, tmp_path: Path) -> None:
        touch(tmp_path, "examples/src/org/top/Example.scala")

        result = resolve_module(parse_example("org.top.Example"), tmp_path, CONFIG)

        assert isinstance(result, Err)

    def test_custom_marker(self, project_root: Path) -> None:
        touch(project_root, "flink-mqtt/demo/src/org/flink/Job.java")
        config = Config(source_marker="demo/src")

        result = resolve_module(parse_example("org.flink.Job"), project_root, config)

        assert isinstance(result, Ok)
        assert result.value.name == "flink-mqtt"
