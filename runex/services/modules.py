"""Module resolution.

Finds the Maven module that owns an example by running an ordered list of
probes over the project tree; the first probe that matches wins:

1. source tree:      the full fragment under ``examples/src/``
2. compiled classes: the full fragment under ``target/`` (nested classes
   such as ``Outer$Inner`` only exist there)
3. package source:   the package fragment under ``examples/src/``

Each probe derives the module directory by cutting the matched path at its
marker directory.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from runex.core.config import Config
from runex.core.example import Example
from runex.core.result import Err, Ok, Result
from runex.platform.walk import iter_files
from runex.services.errors import ModuleNotFound

__all__ = [
    "DEFAULT_PROBES",
    "Module",
    "Probe",
    "ProbeMatch",
    "probe_compiled_classes",
    "probe_package_source",
    "probe_source_tree",
    "resolve_module",
]


@dataclass(frozen=True, slots=True)
class ProbeMatch:
    """A probe hit: the owning module directory and the file that matched."""

    module_path: Path
    source: Path


Probe = Callable[[Example, Path, Config], ProbeMatch | None]


@dataclass(frozen=True, slots=True)
class Module:
    """Resolved module.

    Attributes:
        path: Absolute module directory
        name: Module path relative to the project root (posix form)
        source: File that located the module
        probe: Name of the probe that matched
    """

    path: Path
    name: str
    source: Path
    probe: str

    @property
    def artifact_name(self) -> str:
        """Module name as it appears in artifact ids and jar file names."""
        return self.name.replace("/", "-")


def _search_fragment(example: Example, root: Path) -> str:
    fragment = example.search_fragment
    if example.is_script and Path(fragment).is_absolute():
        try:
            return Path(fragment).resolve().relative_to(root.resolve()).as_posix()
        except ValueError:
            return fragment
    return fragment


def _first_match(root: Path, fragment: str, marker: str) -> ProbeMatch | None:
    """Find the first file below ``marker`` whose path contains ``fragment``.

    Paths are compared relative to ``root``; the module is everything before
    the first ``/<marker>/``. A match directly under the root is ignored,
    since the root itself is not a module.
    """
    needle = f"/{marker}/"
    for file in iter_files(root):
        rel = "/" + file.relative_to(root).as_posix()
        cut = rel.find(needle)
        if cut <= 0 or fragment not in rel:
            continue
        return ProbeMatch(module_path=root / rel[1:cut], source=file)
    return None


def probe_source_tree(example: Example, root: Path, config: Config) -> ProbeMatch | None:
    """Match the full fragment under the example source marker."""
    return _first_match(root, _search_fragment(example, root), config.source_marker)


def probe_compiled_classes(example: Example, root: Path, config: Config) -> ProbeMatch | None:
    """Match the full fragment under the build output directory."""
    return _first_match(root, _search_fragment(example, root), config.compiled_marker)


def probe_package_source(example: Example, root: Path, config: Config) -> ProbeMatch | None:
    """Match only the package fragment under the example source marker."""
    if example.package_fragment is None:
        return None
    return _first_match(root, example.package_fragment, config.source_marker)


DEFAULT_PROBES: tuple[Probe, ...] = (
    probe_source_tree,
    probe_compiled_classes,
    probe_package_source,
)


def resolve_module(
    example: Example,
    root: Path,
    config: Config,
    probes: Sequence[Probe] = DEFAULT_PROBES,
) -> Result[Module, ModuleNotFound]:
    """Resolve the module owning ``example``.

    Args:
        example: Parsed example identifier
        root: Project root
        config: Resolution conventions
        probes: Probes to try, in order

    Returns:
        Ok(Module) from the first matching probe
        Err(ModuleNotFound) if no probe matches
    """
    for probe in probes:
        hit = probe(example, root, config)
        if hit is None:
            continue
        return Ok(
            Module(
                path=hit.module_path,
                name=hit.module_path.relative_to(root).as_posix(),
                source=hit.source,
                probe=getattr(probe, "__name__", repr(probe)),
            )
        )
    return Err(ModuleNotFound(example=example.name))
