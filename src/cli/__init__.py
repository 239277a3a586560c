"""Command-line interface.

This module maps ``svmfetch`` subcommands onto SDK calls.
"""
