"""Abstract wmctrl command proxy.

Every convenience method only builds an argument vector and hands it to
``execute``. Subclasses decide how the process is run; whatever ``execute``
returns (text, or an awaitable of text) is returned unchanged.
"""

import logging
import shlex
from abc import ABC, abstractmethod

from wmctrl_wrapper.binaries import resolve_binary
from wmctrl_wrapper.errors import CommandError

logger = logging.getLogger(__name__)


def build_argv(args):
    """Turn an argument string or sequence into a list of strings.

    Strings are split with POSIX shell rules, so quoting inside them is
    honoured, but no shell is ever involved in running the command.
    """
    if isinstance(args, str):
        return shlex.split(args)
    return [str(a) for a in args]


class WmctrlBase(ABC):
    """Resolves the wmctrl binary once and exposes its common operations."""

    def __init__(self, machine=None, bin_dir=None):
        self._binary_path = resolve_binary(machine=machine, bin_dir=bin_dir)
        logger.debug(f"Using wmctrl binary: {self._binary_path}")

    @property
    def binary_path(self):
        """Absolute path of the wmctrl binary used by this instance."""
        return self._binary_path

    def __repr__(self):
        return f"{type(self).__name__}(binary_path={str(self._binary_path)!r})"

    def command(self, args):
        """Return the full argv (binary first) that execute() would run.

        An argument string that cannot be split (e.g. an unbalanced quote)
        raises CommandError before any process is started.
        """
        try:
            argv = build_argv(args)
        except ValueError as e:
            raise CommandError([str(self._binary_path), args], None, message=str(e)) from e
        return [str(self._binary_path)] + argv

    @abstractmethod
    def execute(self, args):
        """Run wmctrl with the given arguments and return its stdout.

        Raises CommandError carrying stderr if the process fails.
        """
        pass

    # -- environment -----------------------------------------------------

    def show_info(self):
        """Show information about the window manager and environment."""
        return self.execute(['-m'])

    def list_windows(self):
        """List windows managed by the window manager."""
        return self.execute(['-l'])

    def list_desktops(self):
        """List virtual desktops."""
        return self.execute(['-d'])

    def switch_desktop(self, desktop):
        """Switch to the specified desktop."""
        return self.execute(['-s', desktop])

    # -- windows ---------------------------------------------------------

    def activate_window(self, window):
        """Switch to the window's desktop and raise it."""
        return self.execute(['-a', window])

    def close_window(self, window):
        """Close the window gracefully."""
        return self.execute(['-c', window])

    def move_window_to_current_desktop(self, window):
        """Move the window to the current desktop and activate it."""
        return self.execute(['-R', window])

    def move_window_to_desktop(self, window, desktop):
        """Move the window to the specified desktop."""
        return self.execute(['-r', window, '-t', desktop])

    def resize_move_window(self, window, mvarg):
        """Resize and move the window.

        mvarg is wmctrl's 'gravity,x,y,width,height' string, e.g. '0,10,10,200,200'.
        """
        return self.execute(['-r', window, '-e', mvarg])

    def change_window_state(self, window, starg):
        """Change window state, e.g. 'add,maximized_vert,maximized_horz'."""
        return self.execute(['-r', window, '-b', starg])

    def set_window_name(self, window, name):
        """Set the name (long title) of the window."""
        return self.execute(['-r', window, '-N', name])

    def set_window_icon_name(self, window, icon_name):
        """Set the icon name (short title) of the window."""
        return self.execute(['-r', window, '-I', icon_name])

    def set_window_title(self, window, name):
        """Set both the name and the icon name of the window."""
        return self.execute(['-r', window, '-T', name])

    # -- desktops --------------------------------------------------------

    def show_desktop(self, on):
        """Turn the window manager's "showing the desktop" mode on or off."""
        return self.execute(['-k', 'on' if on else 'off'])

    def change_viewport(self, x, y):
        """Change the viewport of the current desktop."""
        return self.execute(['-o', f"{x},{y}"])

    def change_number_of_desktops(self, num):
        """Change the number of desktops."""
        return self.execute(['-n', num])

    def change_desktop_geometry(self, width, height):
        """Change the geometry (common size) of all desktops."""
        return self.execute(['-g', f"{width},{height}"])
