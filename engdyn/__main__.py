"""
Entry point for running engdyn as a module.

Usage:
    python -m engdyn list
    python -m engdyn example 2.3
    python -m engdyn root-find --integrand "sqrt(0.04+0.08*B^2)" --target 2.5 --upper 10 --margin 0.005
"""

import sys

from engdyn.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
