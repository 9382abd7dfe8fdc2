"""Shared fixtures: a fake multi-module checkout and a fake Maven."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from runex.core.result import Err, Ok, Result
from runex.platform.process import ProcessError

MQTT_SCALA = (
    "streaming-mqtt/examples/src/main/scala/org/apache/spark/examples/streaming/mqtt/"
    "MQTTWordCount.scala"
)
MQTT_PY = "streaming-mqtt/examples/src/main/python/streaming/mqtt_wordcount.py"
MQTT_JAR = "streaming-mqtt/target/spark-streaming-mqtt_2.11-2.2.0-tests.jar"
AKKA_SCALA = (
    "streaming-akka/examples/src/main/scala/org/apache/spark/examples/streaming/akka/"
    "ActorWordCount.scala"
)
AKKA_NESTED_CLASS = (
    "streaming-akka/target/scala-2.11/test-classes/org/apache/spark/examples/streaming/akka/"
    "ActorWordCount$FeederActor.class"
)
AKKA_JAR = "streaming-akka/target/spark-streaming-akka_2.11-2.2.0-tests.jar"

# Python child that takes half a second to shut down on SIGINT, then exits 7.
# argv: <ready file> <stopped file>
SIGINT_CHILD = """
import pathlib, signal, sys, time
ready, stopped = (pathlib.Path(p) for p in sys.argv[1:3])

def stop(signum, frame):
    time.sleep(0.5)
    stopped.write_text("stopped")
    sys.exit(7)

signal.signal(signal.SIGINT, stop)
ready.write_text("ready")
while True:
    time.sleep(0.05)
"""

SRC_ROOT = Path(__file__).resolve().parents[2]


def touch(root: Path, rel: str, content: str = "") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A two-module checkout with sources, compiled classes and test jars."""
    root = tmp_path / "bahir"
    for rel in (
        "pom.xml",
        "streaming-mqtt/pom.xml",
        "streaming-akka/pom.xml",
        MQTT_SCALA,
        MQTT_PY,
        MQTT_JAR,
        AKKA_SCALA,
        AKKA_NESTED_CLASS,
        AKKA_JAR,
        "streaming-mqtt/python/mqtt.py",
    ):
        touch(root, rel)
    return root


@pytest.fixture
def spark_home(tmp_path: Path) -> Path:
    home = tmp_path / "spark"
    touch(home, "bin/spark-submit", "#!/bin/sh\n")
    return home


@dataclass
class FakeMavenRunner:
    """Stands in for ``runex.platform.process.run`` when Maven is queried."""

    outputs: dict[str, str] = field(
        default_factory=lambda: {
            "project.version": "2.2.0",
            "scala.binary.version": "2.11",
        }
    )
    fail_with: ProcessError | None = None
    calls: list[tuple[list[str], Path]] = field(default_factory=list)

    def __call__(self, cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
        self.calls.append((cmd, cwd))
        if self.fail_with is not None:
            return Err(self.fail_with)
        expression = cmd[-1].removeprefix("-Dexpression=")
        return Ok(self.outputs.get(expression, "null object or invalid expression"))

    @property
    def expressions(self) -> list[str]:
        return [cmd[-1].removeprefix("-Dexpression=") for cmd, _ in self.calls]


@pytest.fixture
def fake_maven() -> FakeMavenRunner:
    return FakeMavenRunner()


def spawn_python(code: str, *args: str) -> subprocess.Popen[bytes]:
    """Start ``python -c code`` in a new session with runex importable."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC_ROOT), env.get("PYTHONPATH")) if p)
    return subprocess.Popen([sys.executable, "-c", code, *args], env=env, start_new_session=True)


def wait_for(path: Path, timeout: float = 10.0) -> None:
    deadline = time.monotonic() + timeout
    while not path.exists():
        if time.monotonic() > deadline:
            raise AssertionError(f"timed out waiting for {path}")
        time.sleep(0.02)
