# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Documentation pipeline: collect, extract, parse, render and write."""

import logging
from dataclasses import dataclass
from pathlib import Path

from policydoc.annotations import parse_annotations
from policydoc.collector import collect_policy_files, read_policy
from policydoc.comments import CommentExtractor
from policydoc.config import DocOptions
from policydoc.errors import AnnotationError, SyntaxParseError
from policydoc.extractors import RegoCommentExtractor
from policydoc.model import AnnotationRecord
from policydoc.renderer import render_table
from policydoc.writer import write_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentationResult:
    """Represent the outcome of one documentation run."""

    output_path: Path
    file_count: int
    record_count: int


class DocumentationGenerator:
    """Generate a policy table document from a policy directory."""

    def __init__(self, extractor: CommentExtractor | None = None) -> None:
        """Initialize generator.

        Args:
            extractor: Comment extractor; defaults to the Rego extractor.
        """
        self._extractor = extractor or RegoCommentExtractor()

    def collect_records(self, root_path: Path) -> tuple[list[AnnotationRecord], int]:
        """Parse annotation records from every policy file under a root.

        Args:
            root_path: Policy directory.

        Returns:
            Records in file walk order and the number of files scanned.

        Raises:
            CollectionError: If policy files cannot be enumerated.
            ReadError: If a policy file cannot be read.
            SyntaxParseError: If a policy file has syntax errors.
            AnnotationError: If a kinds annotation is malformed.
        """
        policy_files = collect_policy_files(root_path)
        records: list[AnnotationRecord] = []
        for file_path in policy_files:
            records.extend(self._parse_file(file_path))
        return records, len(policy_files)

    def render(self, root_path: Path) -> str:
        """Render the document for a policy directory without writing it."""
        records, _ = self.collect_records(root_path)
        return render_table(records)

    def write(self, options: DocOptions) -> DocumentationResult:
        """Generate and write the document described by the options.

        Nothing is written unless every policy file parses.

        Args:
            options: Run options.

        Returns:
            Run summary.
        """
        records, file_count = self.collect_records(options.root_path)
        write_document(render_table(records), options.output_path)
        logger.info(
            f"Documentation written (path={options.output_path} files={file_count} records={len(records)})"
        )
        return DocumentationResult(
            output_path=options.output_path,
            file_count=file_count,
            record_count=len(records),
        )

    def _parse_file(self, file_path: Path) -> list[AnnotationRecord]:
        source = read_policy(file_path)
        comments, diagnostics = self._extractor.extract(source)
        if diagnostics:
            raise SyntaxParseError(file_path, diagnostics)
        try:
            records = parse_annotations(comments)
        except AnnotationError as exc:
            raise AnnotationError(f"{file_path}: {exc}") from exc
        logger.debug(
            f"Parsed policy file (file_path={file_path} comments={len(comments)} records={len(records)})"
        )
        return records
