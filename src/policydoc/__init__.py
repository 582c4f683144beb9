# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Generate markdown documentation from annotated Rego policies."""

from policydoc.annotations import dedupe_groups, parse_annotations
from policydoc.generator import DocumentationGenerator, DocumentationResult
from policydoc.model import AnnotationRecord
from policydoc.renderer import render_table

__all__ = [
    "AnnotationRecord",
    "DocumentationGenerator",
    "DocumentationResult",
    "dedupe_groups",
    "parse_annotations",
    "render_table",
]
