"""Dataset acquisition layer.

This module downloads remote LIBSVM files into the cache root
and decompresses archives into reusable local siblings.
"""
