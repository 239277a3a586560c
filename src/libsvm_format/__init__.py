"""LIBSVM parsing layer.

This module decodes sparse LIBSVM text into feature matrices and
label containers, with optional unit-norm column scaling.
"""
