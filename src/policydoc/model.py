# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for policy documentation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """Represent one source comment.

    Attributes:
        text: Comment body following the ``#`` leader.
        line: Line of the comment leader (1-based).
        column: Column of the comment leader (1-based).
    """

    text: str
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class SyntaxDiagnostic:
    """Represent one syntax error reported while scanning a policy."""

    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: rego_parse_error: {self.message}"


@dataclass(frozen=True)
class KindPair:
    """Represent one ``group/Kind`` token of a kinds annotation."""

    group: str
    kind: str


@dataclass(frozen=True)
class AnnotationRecord:
    """Represent one row of the generated policy table.

    Attributes:
        api_groups: API groups, deduplicated case-insensitively.
        kinds: Kinds in annotation order, one per pair, never deduplicated.
        description: Trimmed text of the comment preceding the annotation.
    """

    api_groups: tuple[str, ...]
    kinds: tuple[str, ...]
    description: str = ""
