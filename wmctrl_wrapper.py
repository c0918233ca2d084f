#!/usr/bin/env python3
"""Top-level wrapper script for wmctrl-wrapper.

Allows running directly: python wmctrl_wrapper.py [args]
"""

from wmctrl_wrapper.cli import main

if __name__ == "__main__":
    main()
