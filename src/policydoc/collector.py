# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Policy file discovery and reading."""

import logging
from pathlib import Path

import pathspec

from policydoc.config import POLICY_FILE_PATTERNS, SKIPPED_DIRECTORIES
from policydoc.errors import CollectionError, ReadError

logger = logging.getLogger(__name__)


class PolicyMatcher:
    """Match policy file names against gitignore-style patterns.

    Only the file's own name is matched, so a directory such as
    ``bundle.rego/`` never selects the files beneath it.
    """

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        self._spec = spec

    @classmethod
    def from_patterns(
        cls, patterns: tuple[str, ...] = POLICY_FILE_PATTERNS
    ) -> "PolicyMatcher":
        """Compile gitignore-style patterns into a matcher."""
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(patterns))

    def matches(self, file_name: str) -> bool:
        """Check whether a file name is a policy file name."""
        return self._spec.match_file(file_name)


def collect_policy_files(
    root_path: Path, matcher: PolicyMatcher | None = None
) -> list[Path]:
    """Collect policy files beneath a root directory.

    Directories are walked depth-first with entries in name order, so the
    result is stable for a given tree. Symlinked directories are not followed.

    Args:
        root_path: Directory to scan.
        matcher: Policy file matcher; defaults to Rego sources.

    Returns:
        Policy file paths in walk order.

    Raises:
        CollectionError: If the root is missing, not a directory or unreadable.
    """
    matcher = matcher or PolicyMatcher.from_patterns()
    if not root_path.exists():
        raise CollectionError(root_path, "path does not exist")
    if not root_path.is_dir():
        raise CollectionError(root_path, "path is not a directory")

    policy_files: list[Path] = []
    _walk(root_path, matcher, policy_files)
    logger.debug(f"Collected policy files (root={root_path} count={len(policy_files)})")
    return policy_files


def _walk(current: Path, matcher: PolicyMatcher, found: list[Path]) -> None:
    try:
        children = sorted(current.iterdir(), key=lambda item: item.name)
    except OSError as exc:
        raise CollectionError(current, str(exc)) from exc

    for child in children:
        if child.is_dir() and not child.is_symlink():
            if child.name in SKIPPED_DIRECTORIES:
                continue
            _walk(child, matcher, found)
            continue
        if child.is_file() and matcher.matches(child.name):
            found.append(child)


def read_policy(file_path: Path) -> str:
    """Read one policy file as UTF-8 text.

    Raises:
        ReadError: If the file cannot be read or decoded.
    """
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(file_path, str(exc)) from exc
