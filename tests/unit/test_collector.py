# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for policy collection and document writing."""

from pathlib import Path

import pytest

from policydoc.collector import PolicyMatcher, collect_policy_files, read_policy
from policydoc.errors import CollectionError, ReadError, WriteError
from policydoc.writer import write_document


def test_doc_col_001_collects_rego_files_depth_first_in_name_order(write_policy) -> None:
    root = write_policy("b.rego", "package b\n").parent
    write_policy("a/z.rego", "package a.z\n")
    write_policy("a/y/x.rego", "package a.y.x\n")
    write_policy("c.rego", "package c\n")

    collected = collect_policy_files(root)

    assert [path.relative_to(root).as_posix() for path in collected] == [
        "a/y/x.rego",
        "a/z.rego",
        "b.rego",
        "c.rego",
    ]


def test_doc_col_002_skips_tests_other_extensions_and_git_dir(write_policy) -> None:
    root = write_policy("policy.rego", "package policy\n").parent
    write_policy("policy_test.rego", "package policy\n")
    write_policy("README.md", "# docs\n")
    write_policy("policy.rego.bak", "package policy\n")
    write_policy(".git/hooks/hook.rego", "package hook\n")

    collected = collect_policy_files(root)

    assert collected == [root / "policy.rego"]


def test_doc_col_003_missing_or_file_root_raises_collection_error(tmp_path: Path) -> None:
    file_root = tmp_path / "file.rego"
    file_root.write_text("package x\n", encoding="utf-8")

    with pytest.raises(CollectionError, match="does not exist"):
        collect_policy_files(tmp_path / "missing")
    with pytest.raises(CollectionError, match="not a directory"):
        collect_policy_files(file_root)


def test_doc_col_004_matcher_accepts_custom_patterns() -> None:
    matcher = PolicyMatcher.from_patterns(("*.rego", "!*.generated.rego"))

    assert matcher.matches("policy.rego")
    assert not matcher.matches("policy.generated.rego")
    assert not matcher.matches("policy.txt")


def test_doc_col_005_read_policy_wraps_decode_and_missing_errors(tmp_path: Path) -> None:
    bad = tmp_path / "bad.rego"
    bad.write_bytes(b"\xff\xfe\x00package")

    with pytest.raises(ReadError):
        read_policy(bad)
    with pytest.raises(ReadError):
        read_policy(tmp_path / "missing.rego")


def test_doc_col_006_write_document_overwrites_existing_file(tmp_path: Path) -> None:
    output_path = tmp_path / "policies.md"
    output_path.write_text("stale", encoding="utf-8")

    write_document("# Policies\n", output_path)

    assert output_path.read_text(encoding="utf-8") == "# Policies\n"
    assert not (tmp_path / "policies.md.tmp").exists()


def test_doc_col_007_write_document_raises_write_error(tmp_path: Path) -> None:
    with pytest.raises(WriteError):
        write_document("# Policies\n", tmp_path / "missing" / "policies.md")


def test_doc_col_008_directory_with_policy_extension_is_not_a_policy(
    write_policy,
) -> None:
    root = write_policy("bundle.rego/README.md", "# bundle\n").parent.parent
    write_policy("bundle.rego/data.json", "{}\n")
    write_policy("bundle.rego/inner.rego", "package inner\n")

    collected = collect_policy_files(root)

    assert [path.relative_to(root).as_posix() for path in collected] == [
        "bundle.rego/inner.rego"
    ]


def test_doc_col_009_unreadable_directory_raises_collection_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _denied(self: Path):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", _denied)

    with pytest.raises(CollectionError, match="Permission denied"):
        collect_policy_files(tmp_path)


def test_doc_col_010_write_document_writes_through_symlink(tmp_path: Path) -> None:
    target = tmp_path / "docs" / "policies.md"
    target.parent.mkdir()
    target.write_text("stale", encoding="utf-8")
    link = tmp_path / "policies.md"
    link.symlink_to(target)

    write_document("# Policies\n", link)

    assert link.is_symlink()
    assert target.read_text(encoding="utf-8") == "# Policies\n"
