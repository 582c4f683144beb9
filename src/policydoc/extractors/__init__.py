# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Comment extractors for supported policy languages."""

from policydoc.extractors.rego import (
    RegoCommentExtractor,
    RegopySyntaxValidator,
    SyntaxValidator,
)

__all__ = ["RegoCommentExtractor", "RegopySyntaxValidator", "SyntaxValidator"]
