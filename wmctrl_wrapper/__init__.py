"""Python binding for the bundled, architecture-specific wmctrl binaries."""

from wmctrl_wrapper._version import __version__, __app_name__, PIP_VERSION
from wmctrl_wrapper.binaries import resolve_binary, supported_architectures
from wmctrl_wrapper.core import AsyncWmctrl, Wmctrl
from wmctrl_wrapper.errors import (
    CommandError,
    UnsupportedArchitectureError,
    WmctrlError,
)

__all__ = [
    'AsyncWmctrl',
    'CommandError',
    'UnsupportedArchitectureError',
    'Wmctrl',
    'WmctrlError',
    'resolve_binary',
    'supported_architectures',
]
