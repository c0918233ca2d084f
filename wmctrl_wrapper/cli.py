"""Command-line interface for wmctrl-wrapper."""

import argparse
import logging
import sys

from wmctrl_wrapper import __version__, __app_name__
from wmctrl_wrapper.binaries import supported_architectures
from wmctrl_wrapper.core import Wmctrl
from wmctrl_wrapper.errors import CommandError, WmctrlError

# subcommand -> (Wmctrl method, positional argument names, help)
COMMANDS = {
    'info':             ('show_info', [], 'Show window manager information (-m)'),
    'list':             ('list_windows', [], 'List managed windows (-l)'),
    'desktops':         ('list_desktops', [], 'List desktops (-d)'),
    'switch':           ('switch_desktop', ['desktop'], 'Switch to a desktop (-s)'),
    'activate':         ('activate_window', ['window'],
                         "Go to the window's desktop and raise it (-a)"),
    'close':            ('close_window', ['window'], 'Close a window gracefully (-c)'),
    'bring':            ('move_window_to_current_desktop', ['window'],
                         'Move a window to the current desktop and activate it (-R)'),
    'move':             ('move_window_to_desktop', ['window', 'desktop'],
                         'Move a window to another desktop (-r -t)'),
    'geometry':         ('resize_move_window', ['window', 'mvarg'],
                         'Resize/move a window, MVARG is g,x,y,w,h (-r -e)'),
    'state':            ('change_window_state', ['window', 'starg'],
                         'Change window state, e.g. add,above (-r -b)'),
    'name':             ('set_window_name', ['window', 'name'],
                         'Set the long title of a window (-r -N)'),
    'icon-name':        ('set_window_icon_name', ['window', 'icon_name'],
                         'Set the short title of a window (-r -I)'),
    'title':            ('set_window_title', ['window', 'name'],
                         'Set both titles of a window (-r -T)'),
    'viewport':         ('change_viewport', ['x', 'y'],
                         'Change the viewport of the current desktop (-o)'),
    'desktop-count':    ('change_number_of_desktops', ['num'],
                         'Change the number of desktops (-n)'),
    'desktop-geometry': ('change_desktop_geometry', ['width', 'height'],
                         'Change the size of all desktops (-g)'),
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Control the window manager through the bundled wmctrl binary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""\
examples:
  %(prog)s list                              List windows
  %(prog)s activate 0x03a00007               Raise a window
  %(prog)s title 0x03a00007 "My Window"      Set both window titles
  %(prog)s geometry 0x03a00007 0,10,10,800,600
  %(prog)s show-desktop on                   Enter "show desktop" mode
  %(prog)s raw -- -l -G -p                   Pass arguments straight to wmctrl
  %(prog)s --arch aarch64 which              Show the binary for another arch

supported architectures: {', '.join(supported_architectures())}""",
    )
    parser.add_argument(
        '--version', action='version',
        version=f'{__app_name__} {__version__}'
    )
    parser.add_argument(
        '--arch', type=str, default=None, metavar='MACHINE',
        help='Machine type to select the binary for (default: detected)'
    )
    parser.add_argument(
        '--bin-dir', type=str, default=None, metavar='PATH',
        help='Directory holding the wmctrl-<arch> binaries (default: bundled)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Verbose logging output'
    )

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True

    for name, (method, params, help_text) in COMMANDS.items():
        p = sub.add_parser(name, help=help_text, description=help_text)
        for param in params:
            p.add_argument(param)
        p.set_defaults(method=method, params=params)

    p = sub.add_parser('show-desktop', help='Toggle "show desktop" mode (-k)')
    p.add_argument('mode', choices=['on', 'off'])
    p.set_defaults(method=None)

    p = sub.add_parser('which', help='Print the resolved wmctrl binary path')
    p.set_defaults(method=None)

    p = sub.add_parser('raw', help='Run wmctrl with arbitrary arguments')
    p.add_argument('args', nargs=argparse.REMAINDER)
    p.set_defaults(method=None)

    return parser


def run_command(wmctrl, args):
    """Dispatch parsed arguments to the proxy and return the output text."""
    if args.command == 'which':
        return f"{wmctrl.binary_path}\n"
    if args.command == 'show-desktop':
        return wmctrl.show_desktop(args.mode == 'on')
    if args.command == 'raw':
        raw = args.args
        if raw and raw[0] == '--':
            raw = raw[1:]
        return wmctrl.execute(raw)
    values = [getattr(args, param) for param in args.params]
    return getattr(wmctrl, args.method)(*values)


def _exit_status(returncode):
    """Map a wmctrl return code to a shell exit status.

    Death by signal N (negative returncode) becomes 128 + N; no process or a
    zero code becomes 1.
    """
    if not returncode:
        return 1
    if returncode < 0:
        return 128 - returncode
    return returncode


def _failure_message(e):
    """Text written to stderr for a failed command."""
    if e.stderr:
        # wmctrl's own error text goes through untouched
        return e.stderr
    if e.returncode is None:
        return f"Error: {e}\n"
    return f"Error: wmctrl exited with status {e.returncode}\n"


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s',
    )

    try:
        wmctrl = Wmctrl(machine=args.arch, bin_dir=args.bin_dir)
        output = run_command(wmctrl, args)
    except CommandError as e:
        sys.stderr.write(_failure_message(e))
        sys.exit(_exit_status(e.returncode))
    except WmctrlError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(output)
