"""Shared fixtures: a stand-in wmctrl binary written as a shell script."""

import os
import stat

import pytest

# Prints each argument in brackets so tests can see argv boundaries.
#   --fail CODE MSG   write MSG to stderr and exit with CODE
#   --raw             write a fixed chunk with surrounding whitespace
#   -l                print the script's own PID (unique per process)
#   --signal          kill itself with SIGTERM
FAKE_WMCTRL = r"""#!/bin/sh
case "$1" in
  --signal)
    kill -TERM $$
    ;;
  --fail)
    printf '%s' "$3" >&2
    printf 'partial'
    exit "$2"
    ;;
  --raw)
    printf '  leading and trailing  \r\n\n'
    exit 0
    ;;
  -l)
    sleep 0.2
    printf 'windows from %s\n' "$$"
    exit 0
    ;;
esac
for arg in "$@"; do
  printf '[%s]' "$arg"
done
printf '\n'
"""

@pytest.fixture
def fake_bin_dir(tmp_path):
    """Directory holding an executable fake wmctrl-amd64."""
    binary = tmp_path / 'wmctrl-amd64'
    binary.write_text(FAKE_WMCTRL)
    binary.chmod(binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tmp_path


@pytest.fixture
def spaced_bin_dir(tmp_path):
    """Same fake binary, in a directory whose path contains a space."""
    directory = tmp_path / 'dir with space'
    directory.mkdir()
    binary = directory / 'wmctrl-amd64'
    binary.write_text(FAKE_WMCTRL)
    os.chmod(binary, 0o755)
    return directory
