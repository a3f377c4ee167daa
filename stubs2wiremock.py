#!/usr/bin/env python3
"""
WireMock Stubs - mapping file generator

This is a convenience wrapper that calls the packaged implementation.
The actual implementation is in src/wiremock_stubs/cli.py

Usage:
    python stubs2wiremock.py stubs.yaml --output wiremock/mappings
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from wiremock_stubs.cli import main

if __name__ == '__main__':
    sys.exit(main())
