"""Dataset catalog layer.

This module holds the immutable table of known LIBSVM datasets.
It resolves dataset names to remote files, kinds, and declared shapes.
"""
