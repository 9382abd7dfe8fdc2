"""Core domain types and logic."""

from .config import Config, ConfigError, load_config, load_project_config
from .errors import ErrorCode
from .example import Example, parse_example
from .project import Project, ProjectError, detect_project
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_project_config",
    # errors
    "ErrorCode",
    # example
    "Example",
    "parse_example",
    # project
    "Project",
    "ProjectError",
    "detect_project",
    # result
    "Err",
    "Ok",
    "Result",
]
