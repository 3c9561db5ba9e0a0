#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Usage:
    python run.py play
    python run.py check --position 0,0,...,1,2
    python run.py benchmark --iterations 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
