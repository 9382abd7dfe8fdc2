"""Test artifact resolution."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path

from runex.core.config import Config
from runex.core.result import Err, Ok, Result
from runex.platform.walk import iter_files
from runex.services.errors import ArtifactNotFound
from runex.services.modules import Module

__all__ = ["artifact_pattern", "resolve_artifact"]


def artifact_pattern(module: Module, config: Config) -> str:
    """File name pattern of the module's test artifact, e.g. ``*streaming-mqtt*-tests.jar``."""
    return f"*{module.artifact_name}*{config.artifact_suffix}"


def resolve_artifact(module: Module, config: Config) -> Result[Path, ArtifactNotFound]:
    """Find the first test artifact inside the module subtree.

    The artifact only exists after the module has been built and installed,
    so a miss carries a hint telling the user to run the install step.
    """
    pattern = artifact_pattern(module, config)
    for candidate in iter_files(module.path):
        if fnmatchcase(candidate.name, pattern) and candidate.is_file():
            return Ok(candidate)
    return Err(ArtifactNotFound(module_name=module.name, module_path=module.path, pattern=pattern))
