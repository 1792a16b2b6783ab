#!/usr/bin/env python3
"""
CLI entry point for rundown.cli module.

This allows running: python -m rundown.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
