# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Parse kinds annotations out of policy comments.

A kinds annotation is a comment containing the ``@Kinds`` marker followed by
``group/Kind`` pairs::

    # Restricts replica count
    # @Kinds apps/Deployment apps/StatefulSet

The most recent comment that is not an annotation describes the policy.
"""

import functools
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from policydoc.config import KINDS_MARKER
from policydoc.errors import AnnotationError
from policydoc.model import AnnotationRecord, Comment, KindPair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FoldState:
    description: str = ""
    records: tuple[AnnotationRecord, ...] = ()


def parse_annotations(comments: Iterable[Comment | str]) -> list[AnnotationRecord]:
    """Build annotation records from the comments of one file.

    Args:
        comments: File comments in source order.

    Returns:
        One record per annotation comment, in source order.

    Raises:
        AnnotationError: If an annotation token is not a ``group/Kind`` pair.
    """
    normalized = (
        comment if isinstance(comment, Comment) else Comment(text=comment)
        for comment in comments
    )
    state = functools.reduce(_fold_comment, normalized, _FoldState())
    return list(state.records)


def _fold_comment(state: _FoldState, comment: Comment) -> _FoldState:
    if KINDS_MARKER not in comment.text:
        return replace(state, description=comment.text)
    record = build_record(comment, description=state.description)
    return replace(state, records=state.records + (record,))


def build_record(comment: Comment, description: str) -> AnnotationRecord:
    """Build one record from an annotation comment.

    The comment is split on single spaces; the first two tokens are the
    leader and the marker, every remaining token is a pair.

    Args:
        comment: Annotation comment.
        description: Text of the preceding non-annotation comment.

    Returns:
        The annotation record.

    Raises:
        AnnotationError: If a pair token has no ``/`` separator.
    """
    groups: list[str] = []
    kinds: list[str] = []
    for token in comment.text.split(" ")[2:]:
        try:
            pair = parse_kind_pair(token)
        except AnnotationError as exc:
            raise AnnotationError(f"line {comment.line}: {exc}") from exc
        groups.append(pair.group)
        kinds.append(pair.kind)

    return AnnotationRecord(
        api_groups=tuple(dedupe_groups(groups)),
        kinds=tuple(kinds),
        description=description.strip(" "),
    )


def parse_kind_pair(token: str) -> KindPair:
    """Split a ``group/Kind`` token on its first slash.

    Raises:
        AnnotationError: If the token has no slash.
    """
    group, separator, kind = token.partition("/")
    if not separator:
        raise AnnotationError(
            f"malformed kinds annotation token {token!r}, expected group/Kind"
        )
    return KindPair(group=group, kind=kind)


def dedupe_groups(groups: Iterable[str]) -> list[str]:
    """Remove case-insensitive duplicates, keeping the first occurrence."""
    deduped: list[str] = []
    for group in groups:
        if not any(existing.casefold() == group.casefold() for existing in deduped):
            deduped.append(group)
    return deduped
