"""
CLI module for decoding .eml files.

Provides command-line tools for batch decoding and inspection.
"""

from eml_mimeparse.cli.dump import main as dump_main

__all__ = ["dump_main"]
