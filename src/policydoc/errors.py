# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Error types raised while generating policy documentation."""

from pathlib import Path

from policydoc.model import SyntaxDiagnostic


class PolicyDocError(RuntimeError):
    """Represent a fatal documentation run failure."""


class CollectionError(PolicyDocError):
    """Represent a failure enumerating policy files."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to collect policy files under {path}: {reason}")
        self.path = path


class ReadError(PolicyDocError):
    """Represent a failure reading one policy file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read policy file {path}: {reason}")
        self.path = path


class WriteError(PolicyDocError):
    """Represent a failure writing the generated document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write documentation {path}: {reason}")
        self.path = path


class SyntaxParseError(PolicyDocError):
    """Represent syntax errors reported for one policy file.

    Attributes:
        path: Policy file that failed to parse.
        diagnostics: Diagnostics in source order.
    """

    def __init__(self, path: Path, diagnostics: list[SyntaxDiagnostic]) -> None:
        self.path = path
        self.diagnostics = list(diagnostics)
        super().__init__(
            f"Failed to parse {path}: {_format_diagnostics(self.diagnostics)}"
        )


class AnnotationError(PolicyDocError):
    """Represent a malformed kinds annotation."""


def _format_diagnostics(diagnostics: list[SyntaxDiagnostic]) -> str:
    if len(diagnostics) == 1:
        return f"1 error occurred: {diagnostics[0]}"
    lines = [f"{len(diagnostics)} errors occurred:"]
    lines.extend(str(diagnostic) for diagnostic in diagnostics)
    return "\n".join(lines)
