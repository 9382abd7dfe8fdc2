"""Typed configuration for example resolution.

All naming conventions the resolver depends on live in one frozen ``Config``
that is built once at startup and passed explicitly to every service. Defaults
match the Apache Bahir layout; a project can override them with a
``.run-example.toml`` at its root:

    [runtime]
    home_var = "SPARK_HOME"
    submit_tool = "bin/spark-submit"

    [maven]
    executable = "build/mvn"
    version_property = "project.version"
    binary_version_property = "scala.binary.version"

    [coordinate]
    group = "org.apache.bahir"
    artifact_prefix = "spark"

    [search]
    source_marker = "examples/src"
    compiled_marker = "target"
    artifact_suffix = "-tests.jar"
    script_extension = ".py"
    script_roots = ["python"]
    script_path_var = "PYTHONPATH"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_tuple, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "load_config",
    "load_project_config",
]

CONFIG_FILE_NAME = ".run-example.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Resolution conventions.

    Attributes:
        runtime_home_var: Environment variable naming the runtime installation.
        submit_tool: Submission tool, relative to the runtime installation.
        maven: Maven executable override (None: ``build/mvn`` wrapper or ``mvn``).
        version_property: Maven expression for the module release version.
        binary_version_property: Maven expression for the binary-compat version.
        group: Group id of the published example artifacts.
        artifact_prefix: Prefix joined to the module name to form the artifact id.
        source_marker: Directory fragment that marks example sources.
        compiled_marker: Directory name that marks build output.
        artifact_suffix: File name suffix of the test artifact.
        script_extension: Extension that marks script-style examples.
        script_roots: Directory names added to the script search path.
        script_path_var: Environment variable holding the script search path.
    """

    runtime_home_var: str = "SPARK_HOME"
    submit_tool: str = "bin/spark-submit"
    maven: str | None = None
    version_property: str = "project.version"
    binary_version_property: str = "scala.binary.version"
    group: str = "org.apache.bahir"
    artifact_prefix: str = "spark"
    source_marker: str = "examples/src"
    compiled_marker: str = "target"
    artifact_suffix: str = "-tests.jar"
    script_extension: str = ".py"
    script_roots: tuple[str, ...] = ("python",)
    script_path_var: str = "PYTHONPATH"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML), keeping defaults for gaps."""
        default = cls()
        runtime: StrDict = get_table(data, "runtime") or {}
        maven: StrDict = get_table(data, "maven") or {}
        coordinate: StrDict = get_table(data, "coordinate") or {}
        search: StrDict = get_table(data, "search") or {}

        return cls(
            runtime_home_var=get_str(runtime, "home_var") or default.runtime_home_var,
            submit_tool=get_str(runtime, "submit_tool") or default.submit_tool,
            maven=get_str(maven, "executable"),
            version_property=get_str(maven, "version_property") or default.version_property,
            binary_version_property=get_str(maven, "binary_version_property")
            or default.binary_version_property,
            group=get_str(coordinate, "group") or default.group,
            artifact_prefix=get_str(coordinate, "artifact_prefix") or default.artifact_prefix,
            source_marker=_marker(search, "source_marker") or default.source_marker,
            compiled_marker=_marker(search, "compiled_marker") or default.compiled_marker,
            artifact_suffix=get_str(search, "artifact_suffix") or default.artifact_suffix,
            script_extension=get_str(search, "script_extension") or default.script_extension,
            script_roots=get_str_tuple(search, "script_roots") or default.script_roots,
            script_path_var=get_str(search, "script_path_var") or default.script_path_var,
        )


def _marker(table: Mapping[str, object], key: str) -> str | None:
    """Marker directories are matched as `/<marker>/`, so surrounding slashes are dropped."""
    value = get_str(table, key)
    return value.strip("/") or None if value else None


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_project_config(root: Path) -> Result[Config, ConfigError]:
    """Load ``.run-example.toml`` from a project root.

    A missing file is not an error: the defaults are returned.
    """
    path = root / CONFIG_FILE_NAME
    if not path.is_file():
        return Ok(Config())
    return load_config(path)
