"""Selection of the bundled wmctrl binary for the running CPU architecture."""

import platform
import struct
from pathlib import Path

from wmctrl_wrapper.errors import UnsupportedArchitectureError

# Binaries ship in this directory, named wmctrl-<variant>
BIN_DIR = Path(__file__).resolve().parent / 'bin'

BINARIES = {
    'x64': 'wmctrl-amd64',
    'arm64': 'wmctrl-arm64',
    'arm': 'wmctrl-armhf',
    'ia32': 'wmctrl-i386',
}

# platform.machine() spellings seen across Linux, BSD and Windows builds
_ALIASES = {
    'x86_64': 'x64',
    'amd64': 'x64',
    'x64': 'x64',
    'aarch64': 'arm64',
    'arm64': 'arm64',
    'armv8l': 'arm',
    'armv7l': 'arm',
    'armv7': 'arm',
    'armv6l': 'arm',
    'armhf': 'arm',
    'arm': 'arm',
    'i386': 'ia32',
    'i486': 'ia32',
    'i586': 'ia32',
    'i686': 'ia32',
    'x86': 'ia32',
    'ia32': 'ia32',
}


# 64-bit kernel running a 32-bit interpreter
_NARROW = {
    'x64': 'ia32',
    'arm64': 'arm',
}


def _pointer_bits():
    return struct.calcsize('P') * 8


def detect_architecture():
    """Return the machine type the running interpreter was built for.

    platform.machine() reports the kernel, so on a 64-bit kernel a 32-bit
    interpreter is mapped to the 32-bit id ('ia32' or 'arm').
    """
    machine = platform.machine()
    if _pointer_bits() == 32:
        arch = _ALIASES.get(machine.strip().lower())
        if arch in _NARROW:
            return _NARROW[arch]
    return machine


def normalize_architecture(machine):
    """Map a machine string to one of the keys of BINARIES.

    Raises UnsupportedArchitectureError with the original string if unknown.
    """
    arch = _ALIASES.get((machine or '').strip().lower())
    if arch is None:
        raise UnsupportedArchitectureError(machine)
    return arch


def binary_name(machine):
    """Return the bundled binary file name for a machine string."""
    return BINARIES[normalize_architecture(machine)]


def resolve_binary(machine=None, bin_dir=None):
    """Return the absolute path of the wmctrl binary to run.

    machine defaults to the detected architecture, bin_dir to the package's
    own bin/ directory. The file is not checked for existence.
    """
    if machine is None:
        machine = detect_architecture()
    name = binary_name(machine)
    directory = Path(bin_dir) if bin_dir is not None else BIN_DIR
    return (directory / name).resolve()


def supported_architectures():
    return sorted(BINARIES)
