#!/usr/bin/env python3
"""Script to run design pattern benchmarks."""

from pathlib import Path
import sys

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))
sys.path.insert(0, str(project_root.parent / "bench_harness" / "src"))

from pattern_benchmarks.cli import main

if __name__ == "__main__":
    sys.exit(main())
