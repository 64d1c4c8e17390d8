"""Core type definitions for morphic."""

from collections.abc import Hashable

type Identity = Hashable
"""Opaque handle naming a type descriptor.

Any hashable value works: a class, a string, a sentinel object. The registry
only ever uses it as a dictionary key and compares it for equality.
"""
