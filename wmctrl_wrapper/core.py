"""Process-running wmctrl proxies: blocking and asyncio flavours."""

import asyncio
import logging
import subprocess

from wmctrl_wrapper.base import WmctrlBase
from wmctrl_wrapper.errors import CommandError

logger = logging.getLogger(__name__)


def _decode(data):
    """Decode captured output as-is (no stripping, no newline translation)."""
    if not data:
        return ''
    return data.decode('utf-8', errors='replace')


def _check_result(argv, returncode, stdout, stderr):
    """Return stdout text, or raise CommandError for a non-zero exit."""
    out = _decode(stdout)
    if returncode != 0:
        err = _decode(stderr)
        logger.debug(f"wmctrl exited with status {returncode}: {argv[1:]}")
        raise CommandError(argv, returncode, stdout=out, stderr=err)
    return out


class Wmctrl(WmctrlBase):
    """Runs wmctrl synchronously; each call blocks until the process exits.

    Safe to share across threads: every call starts its own process.
    """

    def execute(self, args):
        argv = self.command(args)
        logger.debug(f"Running wmctrl {argv[1:]}")
        try:
            proc = subprocess.run(argv, capture_output=True)
        except OSError as e:
            raise CommandError(argv, None, message=str(e)) from e
        return _check_result(argv, proc.returncode, proc.stdout, proc.stderr)


class AsyncWmctrl(WmctrlBase):
    """Runs wmctrl as an asyncio subprocess.

    execute() and every convenience method return a coroutine; concurrent
    awaits each get their own process.
    """

    async def execute(self, args):
        argv = self.command(args)
        logger.debug(f"Running wmctrl {argv[1:]}")
        try:
            process = await asyncio.create_subprocess_exec(
                *argv, stdout=asyncio.subprocess.PIPE, stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            raise CommandError(argv, None, message=str(e)) from e
        stdout, stderr = await process.communicate()
        return _check_result(argv, process.returncode, stdout, stderr)


__all__ = ['AsyncWmctrl', 'Wmctrl']
