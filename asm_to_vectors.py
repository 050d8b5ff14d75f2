#!/usr/bin/env python3
"""
Convert an annotated .asm file on stdin to a skeleton VHDL testbench on stdout

Lines that access data memory need a comment like
    ;R <data> <address>
    ;W <data> <address>
Summary goes to stderr
"""

import sys

from tbvec.vhdl import vutil
from tbvec.vhdl.asm import run


def main():
    import argparse

    parser = argparse.ArgumentParser(
        description='Convert .asm on stdin to VHDL test vectors on stdout')
    parser.parse_args()

    vutil.setup_stdio()
    run(sys.stdin, sys.stdout, sys.stderr)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
