"""Context - detection, mirroring and overriding of runtime values."""

from .context import RunEnvContext
from .detector import EnvironmentDetector, program_directory
from .mirror import EnvironmentMirror
from .overrides import TOKEN_TABLE, parse_override

__all__ = [
    "RunEnvContext",
    "EnvironmentDetector",
    "EnvironmentMirror",
    "program_directory",
    "TOKEN_TABLE",
    "parse_override",
]
