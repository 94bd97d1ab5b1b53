#!/usr/bin/env python3
"""
Entry point for the struct offset extractor.

This file allows running the tool directly from the project root:
    python main.py build/foo.o --output offsets.txt
"""

import sys
from pathlib import Path

# Add src to path for development mode
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from offset_extractor.main import main

if __name__ == "__main__":
    main()
