"""Example identifiers.

An example is named either by a fully qualified class name
(``org.apache.spark.examples.streaming.akka.ActorWordCount``) or by the path of
a script ending in the configured script extension
(``streaming-mqtt/examples/src/main/python/streaming/mqtt_wordcount.py``).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Example", "parse_example"]


@dataclass(frozen=True, slots=True)
class Example:
    """A parsed example identifier.

    Attributes:
        name: Identifier exactly as given on the command line
        is_script: True for script-style examples
        search_fragment: Path fragment that locates the example's sources
        package_fragment: Path fragment of the enclosing package, if any
    """

    name: str
    is_script: bool
    search_fragment: str
    package_fragment: str | None = None


def parse_example(name: str, script_extension: str = ".py") -> Example:
    """Parse an example identifier into its search fragments.

    Class names have dots converted to ``/``; ``$`` is kept so nested classes
    match their compiled ``Outer$Inner.class`` file. Script paths are used as
    paths, with separators normalised and a leading ``./`` dropped.
    """
    if name.endswith(script_extension):
        fragment = name.replace("\\", "/")
        while fragment.startswith("./"):
            fragment = fragment[2:]
        return Example(name=name, is_script=True, search_fragment=fragment)

    package, _, _ = name.rpartition(".")
    return Example(
        name=name,
        is_script=False,
        search_fragment=name.replace(".", "/"),
        package_fragment=package.replace(".", "/") or None,
    )
