# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Markdown table rendering for annotation records."""

from collections.abc import Iterable

from policydoc.config import DOCUMENT_TITLE, TABLE_COLUMNS
from policydoc.model import AnnotationRecord


def render_table(records: Iterable[AnnotationRecord]) -> str:
    """Render records as a markdown document.

    Cells are not escaped; a description containing ``|`` breaks its row.

    Args:
        records: Records in output order.

    Returns:
        The markdown document text.
    """
    lines = [
        DOCUMENT_TITLE,
        "",
        _row(TABLE_COLUMNS),
        _row(["---"] * len(TABLE_COLUMNS)),
    ]
    for record in records:
        lines.append(
            _row(
                [
                    ", ".join(record.api_groups),
                    ", ".join(record.kinds),
                    record.description,
                ]
            )
        )
    return "\n".join(lines) + "\n"


def _row(cells: Iterable[str]) -> str:
    return "|" + "|".join(cells) + "|"
