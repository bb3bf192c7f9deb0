#!/usr/bin/env python
"""A standalone launcher for the rollingbuffer demo.

Runs the demo straight from a source checkout, without installing the
package first. All arguments are passed through to the demo.

Usage:
    python scripts/run_buffer_demo.py --capacity 20 --samples 40 --kind char
"""

import sys
from pathlib import Path

# Add `src` to the Python path so the package imports without installation.
try:
    SRC_DIR = Path(__file__).resolve().parent.parent / "src"
except NameError:
    SRC_DIR = Path.cwd() / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from rollingbuffer.demo import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
