#!/usr/bin/env python3
"""
Run the bookstore command shell from a source checkout.

Usage:
    python3 scripts/bookstore.py [--data-dir DIR] [--backend tsv|sql] < commands.txt
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


def main() -> int:
    from bookstore_kernel.shell import main as shell_main

    return shell_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
