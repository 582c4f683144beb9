# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rego comment extractor implementation."""

import logging
import re
from typing import Protocol

from regopy import Interpreter, RegoError

from policydoc.model import Comment, SyntaxDiagnostic

logger = logging.getLogger(__name__)

_BRACKET_PAIRS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}
_CLOSING_BRACKETS: dict[str, str] = {
    closing: opening for opening, closing in _BRACKET_PAIRS.items()
}
_ILLEGAL_CHARACTERS = frozenset("$?^~@'\\")

# rego-cpp reports errors as "<message> -- <module>:<line>:<column>".
_REGO_ERROR_PATTERN = re.compile(
    r"^(?P<message>.+?) -- (?P<module>\S+?):(?P<line>\d+):(?P<column>\d+)",
    re.MULTILINE,
)
_MODULE_NAME = "policy"


class SyntaxValidator(Protocol):
    """Grammar-level validation contract for policy source."""

    def validate(self, source: str) -> list[SyntaxDiagnostic]:
        """Return syntax diagnostics for the source; empty when it parses."""


class RegopySyntaxValidator:
    """Validate Rego source with the rego-cpp parser."""

    def validate(self, source: str) -> list[SyntaxDiagnostic]:
        """Parse the source as a Rego module.

        Args:
            source: Policy source text.

        Returns:
            Diagnostics reported by the parser, in source order.
        """
        try:
            Interpreter().add_module(_MODULE_NAME, source)
        except RegoError as exc:
            diagnostics = parse_rego_errors(str(exc))
            logger.debug(f"Rego module rejected (diagnostics={len(diagnostics)})")
            return diagnostics
        return []


def parse_rego_errors(error_text: str) -> list[SyntaxDiagnostic]:
    """Map rego-cpp error text to diagnostics.

    Text without a recognizable location becomes a single diagnostic at 0:0.
    """
    diagnostics = [
        SyntaxDiagnostic(
            line=int(match.group("line")),
            column=int(match.group("column")),
            message=match.group("message").strip(),
        )
        for match in _REGO_ERROR_PATTERN.finditer(error_text)
    ]
    if not diagnostics:
        message = error_text.strip() or "invalid Rego module"
        return [SyntaxDiagnostic(line=0, column=0, message=message)]
    return sorted(diagnostics, key=lambda item: (item.line, item.column))


class RegoCommentExtractor:
    """Scan Rego source and collect comments with syntax diagnostics.

    The scanner locates comments and reports lexical errors: string and raw
    string literals, bracket balance and characters that never occur outside
    literals. Lexically clean source is then parsed by the validator, which
    reports grammar errors.
    """

    def __init__(self, validator: SyntaxValidator | None = None) -> None:
        """Initialize extractor.

        Args:
            validator: Grammar validator; defaults to rego-cpp via ``regopy``.
        """
        self._validator = validator or RegopySyntaxValidator()

    def extract(self, source: str) -> tuple[list[Comment], list[SyntaxDiagnostic]]:
        """Extract comments from Rego source.

        Args:
            source: Policy source text.

        Returns:
            A tuple of comments in source order and syntax diagnostics.
        """
        comments, diagnostics = _Scanner(source).scan()
        if diagnostics:
            return comments, diagnostics
        return comments, self._validator.validate(source)


class _Scanner:
    def __init__(self, source: str) -> None:
        self._source = source
        self._offset = 0
        self._line = 1
        self._column = 1
        self._comments: list[Comment] = []
        self._diagnostics: list[SyntaxDiagnostic] = []
        self._brackets: list[tuple[str, int, int]] = []

    def scan(self) -> tuple[list[Comment], list[SyntaxDiagnostic]]:
        while self._offset < len(self._source):
            char = self._source[self._offset]
            if char == "#":
                self._scan_comment()
            elif char == '"':
                self._scan_string()
            elif char == "`":
                self._scan_raw_string()
            elif char in _BRACKET_PAIRS:
                self._brackets.append((char, self._line, self._column))
                self._advance()
            elif char in _CLOSING_BRACKETS:
                self._close_bracket(char)
                self._advance()
            elif char in _ILLEGAL_CHARACTERS:
                self._report(f"illegal token {char!r}")
                self._advance()
            else:
                self._advance()

        for opening, line, column in self._brackets:
            self._diagnostics.append(
                SyntaxDiagnostic(
                    line=line, column=column, message=f"unclosed {opening}"
                )
            )
        self._diagnostics.sort(key=lambda item: (item.line, item.column))
        logger.debug(
            f"Scanned Rego source (comments={len(self._comments)} diagnostics={len(self._diagnostics)})"
        )
        return self._comments, self._diagnostics

    def _advance(self) -> None:
        if self._source[self._offset] == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        self._offset += 1

    def _report(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self._diagnostics.append(
            SyntaxDiagnostic(
                line=self._line if line is None else line,
                column=self._column if column is None else column,
                message=message,
            )
        )

    def _scan_comment(self) -> None:
        line, column = self._line, self._column
        end = self._source.find("\n", self._offset)
        if end == -1:
            end = len(self._source)
        text = self._source[self._offset + 1 : end]
        if text.endswith("\r"):
            text = text[:-1]
        self._comments.append(Comment(text=text, line=line, column=column))
        self._column += end - self._offset
        self._offset = end

    def _scan_string(self) -> None:
        line, column = self._line, self._column
        self._advance()
        while self._offset < len(self._source):
            char = self._source[self._offset]
            if char == "\n":
                break
            if char == "\\" and self._offset + 1 < len(self._source):
                if self._source[self._offset + 1] == "\n":
                    break
                self._advance()
                self._advance()
                continue
            self._advance()
            if char == '"':
                return
        self._report("non-terminated string", line=line, column=column)

    def _scan_raw_string(self) -> None:
        line, column = self._line, self._column
        self._advance()
        while self._offset < len(self._source):
            char = self._source[self._offset]
            self._advance()
            if char == "`":
                return
        self._report("non-terminated raw string", line=line, column=column)

    def _close_bracket(self, closing: str) -> None:
        if self._brackets and self._brackets[-1][0] == _CLOSING_BRACKETS[closing]:
            self._brackets.pop()
            return
        self._report(f"unexpected {closing} token")
