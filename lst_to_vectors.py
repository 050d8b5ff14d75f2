#!/usr/bin/env python3
"""
Convert a .LST listing on stdin to VHDL instruction word literals on stdout
Output is meant to be included in an existing VHDL array initializer
"""

import sys

from tbvec.vhdl import vutil
from tbvec.vhdl.lst import run


def main():
    import argparse

    parser = argparse.ArgumentParser(
        description='Convert .LST on stdin to VHDL instruction vectors on stdout')
    parser.parse_args()

    vutil.setup_stdio()
    run(sys.stdin, sys.stdout, sys.stderr)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
