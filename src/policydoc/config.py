# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Run configuration and document constants."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT_NAME = "policies.md"

# Gitignore-style selection; Rego unit tests are not documentation sources.
POLICY_FILE_PATTERNS: tuple[str, ...] = ("*.rego", "!*_test.rego")
SKIPPED_DIRECTORIES: frozenset[str] = frozenset({".git"})

KINDS_MARKER = "@Kinds"
DOCUMENT_TITLE = "# Policies"
TABLE_COLUMNS: tuple[str, ...] = ("API Groups", "Kinds", "Description")


@dataclass(frozen=True)
class DocOptions:
    """Describe one documentation run.

    Attributes:
        root_path: Directory scanned for policies; the document is written here.
        output_name: File name of the generated document.
    """

    root_path: Path
    output_name: str = DEFAULT_OUTPUT_NAME

    @property
    def output_path(self) -> Path:
        """Return the full path of the generated document."""
        return self.root_path / self.output_name
