"""Hierarchy generation modules."""

from astgen.generator.base import HierarchyEmitter
from astgen.generator.hierarchy import EMITTERS, emit, emit_schema, get_emitter
from astgen.generator.java import JavaHierarchyEmitter
from astgen.generator.python import PythonHierarchyEmitter
from astgen.generator.writer import write_sources

__all__ = [
    "HierarchyEmitter",
    "JavaHierarchyEmitter",
    "PythonHierarchyEmitter",
    "EMITTERS",
    "emit",
    "emit_schema",
    "get_emitter",
    "write_sources",
]
