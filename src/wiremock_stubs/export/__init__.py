"""
WireMock Stubs Export Module

File-based input and output for stub rules.

This module provides:
- YAML/JSON stub definition loading
- Mapping directory and bundle export
"""

from .loader import StubDefinition, StubDefinitionLoader, build_definition
from .exporter import ExportConfig, MappingExporter, sanitize_filename

__all__ = [
    # Loader
    'StubDefinition',
    'StubDefinitionLoader',
    'build_definition',

    # Exporter
    'ExportConfig',
    'MappingExporter',
    'sanitize_filename',
]
