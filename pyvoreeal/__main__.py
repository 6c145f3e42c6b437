#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PyVoreeal Main Entry Point
--------------------------
When run as `pyvoreeal` or `python -m pyvoreeal`, dispatches to the
command-line tool in pyvoreeal.cli.
"""

import sys

from pyvoreeal.cli import main


if __name__ == "__main__":
    sys.exit(main())
