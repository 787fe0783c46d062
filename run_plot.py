"""
run_plot.py: CLI entry point

Forwards execution to the command-line interface defined in
`src/image_plot/cli.py`, so the tool can be run from a checkout without
installing it or modifying PYTHONPATH.

Usage:
    python run_plot.py a.png b.png c.png d.png --rows 2 [options]

For help on available options, run:
    python run_plot.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import image_plot.cli as ip_cli

if __name__ == "__main__":
    sys.exit(ip_cli.main())
