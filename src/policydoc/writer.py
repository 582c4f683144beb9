# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Document persistence."""

import logging
from pathlib import Path

from policydoc.errors import WriteError

logger = logging.getLogger(__name__)


def write_document(text: str, output_path: Path) -> None:
    """Write the document, replacing any existing file.

    The text goes to a sibling temporary file first, so a failed write leaves
    the previous document untouched. A symlinked target is written through:
    the link is kept and the file it points to is replaced.

    Args:
        text: Document text.
        output_path: Target file path.

    Raises:
        WriteError: If the file cannot be written.
    """
    if output_path.is_symlink():
        output_path = output_path.resolve()
    tmp_path = output_path.with_name(f"{output_path.name}.tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(output_path, str(exc)) from exc
    try:
        tmp_path.replace(output_path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise WriteError(output_path, str(exc)) from exc
    logger.debug(f"Wrote document (path={output_path} bytes={len(text.encode('utf-8'))})")
