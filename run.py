#!/usr/bin/env python3
"""Launch the collection inflector CLI from a source checkout."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from collection_inflector.cli import main

main()
