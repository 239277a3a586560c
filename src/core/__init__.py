"""Shared runtime foundations.

This module holds configuration, constants, errors, logging,
and the typed models used by every other layer.
"""
