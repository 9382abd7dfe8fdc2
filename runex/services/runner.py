"""Example resolution pipeline.

Runs the resolution steps in order, stopping at the first failure:

    runtime home -> module -> test artifact -> versions -> coordinate -> Launch
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from runex.core.config import Config
from runex.core.example import parse_example
from runex.core.project import Project
from runex.core.result import Err, Ok, Result
from runex.services.artifacts import resolve_artifact
from runex.services.environment import check_runtime_home, submit_tool_path
from runex.services.errors import RunError
from runex.services.launch import Launch, build_launch
from runex.services.maven import MavenMetadata, build_coordinate, resolve_versions
from runex.services.modules import DEFAULT_PROBES, Probe, resolve_module

if TYPE_CHECKING:
    from runex.output.console import ConsoleProtocol

__all__ = ["ExampleRunner"]


def _current_env() -> Mapping[str, str]:
    return os.environ


@dataclass
class ExampleRunner:
    """Turns an example identifier into a ``Launch``."""

    project: Project
    config: Config
    maven: MavenMetadata
    console: ConsoleProtocol
    environ: Mapping[str, str] = field(default_factory=_current_env)
    probes: Sequence[Probe] = DEFAULT_PROBES

    def prepare(self, name: str, args: Sequence[str]) -> Result[Launch, RunError]:
        """Resolve ``name`` and assemble the submission command."""
        home = check_runtime_home(self.config, self.environ)
        if isinstance(home, Err):
            return home
        self.console.trace(f"{self.config.runtime_home_var}: {home.value}")

        example = parse_example(name, self.config.script_extension)
        root = self.project.root

        module = resolve_module(example, root, self.config, self.probes)
        if isinstance(module, Err):
            return module
        self.console.trace(f"module: {module.value.name} (via {module.value.probe})")

        artifact = resolve_artifact(module.value, self.config)
        if isinstance(artifact, Err):
            return artifact
        self.console.trace(f"artifact: {artifact.value}")

        versions = resolve_versions(module.value, self.maven, self.config)
        if isinstance(versions, Err):
            return versions

        coordinate = build_coordinate(module.value, versions.value, self.config)
        self.console.trace(f"coordinate: {coordinate}")

        return Ok(
            build_launch(
                example=example,
                module=module.value,
                artifact=artifact.value,
                coordinate=coordinate,
                submit_tool=submit_tool_path(home.value, self.config),
                root=root,
                args=args,
                config=self.config,
                environ=self.environ,
            )
        )
