"""Dataset loading client.

This module composes catalog lookup, acquisition, parsing, and
normalization behind one injectable entry point.
"""
