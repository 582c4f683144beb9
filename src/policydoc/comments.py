"""Comment extractor interface."""

from typing import Protocol

from policydoc.model import Comment, SyntaxDiagnostic


class CommentExtractor(Protocol):
    """Policy-language comment extraction contract."""

    def extract(self, source: str) -> tuple[list[Comment], list[SyntaxDiagnostic]]:
        """Return comments in source order and any syntax diagnostics."""
