# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import builtins
from unittest.mock import patch

import pytest
from loguru import logger

from copyrighter.core.exceptions import FileSystemError
from copyrighter.core.header.renderer import render_header
from copyrighter.core.rewriter.file_rewriter import FileRewriter

HEADER = "// Copyright (c) 2025 by X.\n"


@pytest.fixture
def messages():
    captured = []
    handler_id = logger.add(captured.append, level="INFO", format="{message}")
    yield captured
    logger.remove(handler_id)


def write(path, content: bytes):
    path.write_bytes(content)
    return path


# -----------------------------------------------------------------------------
# Header replacement
# -----------------------------------------------------------------------------


def test_inserts_header_when_no_leading_comment(tmp_path):
    target = write(tmp_path / "main.go", b"package main\n")
    FileRewriter("single", HEADER).rewrite(target)
    assert target.read_bytes() == HEADER.encode() + b"\npackage main\n"


def test_replaces_existing_copyright_block(tmp_path):
    target = write(
        tmp_path / "main.go",
        b"// Copyright (c) 2010 by Old.\n// All rights reserved.\n\npackage main\n",
    )
    FileRewriter("single", HEADER).rewrite(target)
    assert target.read_bytes() == HEADER.encode() + b"\npackage main\n"


def test_replaces_lowercase_copyright_block(tmp_path):
    target = write(tmp_path / "main.go", b"// copyright old\npackage main\n")
    FileRewriter("single", HEADER).rewrite(target)
    assert target.read_bytes() == HEADER.encode() + b"\npackage main\n"


def test_keeps_build_constraint_after_header(tmp_path):
    target = write(tmp_path / "main.go", b"// +build linux\n\npackage main\n")
    FileRewriter("single", HEADER).rewrite(target)
    assert target.read_bytes() == (
        HEADER.encode() + b"\n// +build linux\n\npackage main\n"
    )


def test_uppercase_copyright_is_not_recognised(tmp_path):
    target = write(tmp_path / "main.go", b"// COPYRIGHT OLD\npackage main\n")
    FileRewriter("single", HEADER).rewrite(target)
    assert target.read_bytes() == (
        HEADER.encode() + b"\n// COPYRIGHT OLD\npackage main\n"
    )


def test_replaces_multi_block(tmp_path):
    header = render_header("Copyright $YEAR$", "multi", "2025")
    target = write(
        tmp_path / "main.c", b"/*\n * Copyright 1999\n */\n#include <stdio.h>\n"
    )
    FileRewriter("multi", header).rewrite(target)
    assert target.read_bytes() == (
        b"/*\n * Copyright 2025\n */\n\n#include <stdio.h>\n"
    )


def test_replaces_hash_block_and_keeps_code(tmp_path):
    header = render_header("Copyright $YEAR$", "hash", "2025")
    target = write(tmp_path / "run.py", b"# Copyright 2001\n\nimport os\n")
    FileRewriter("hash", header).rewrite(target)
    assert target.read_bytes() == b"# Copyright 2025\n\nimport os\n"


def test_empty_file_gets_only_header(tmp_path):
    target = write(tmp_path / "empty.go", b"")
    FileRewriter("single", HEADER).rewrite(target)
    assert target.read_bytes() == HEADER.encode()


def test_preserves_non_utf8_bytes(tmp_path):
    body = b"package main\n\nvar s = \"\xff\xfe caf\xe9\"\n"
    target = write(tmp_path / "latin.go", body)
    FileRewriter("single", HEADER).rewrite(target)
    assert target.read_bytes() == HEADER.encode() + b"\n" + body


def test_rewrite_is_idempotent(tmp_path):
    header = render_header("Copyright (c) $YEAR$ by X.\n\nLicensed.", "single", "2025")
    target = write(tmp_path / "main.go", b"// +build linux\npackage main\n")
    rewriter = FileRewriter("single", header)

    rewriter.rewrite(target)
    once = target.read_bytes()
    rewriter.rewrite(target)

    assert target.read_bytes() == once


def test_rewrite_is_idempotent_for_multi(tmp_path):
    header = render_header("Copyright $YEAR$\n\nLicensed.", "multi", "2025")
    target = write(tmp_path / "main.c", b"int main(void) { return 0; }\n")
    rewriter = FileRewriter("multi", header)

    rewriter.rewrite(target)
    once = target.read_bytes()
    rewriter.rewrite(target)

    assert target.read_bytes() == once


# -----------------------------------------------------------------------------
# Progress output
# -----------------------------------------------------------------------------


def test_reports_updated_path(tmp_path, messages):
    target = write(tmp_path / "main.go", b"package main\n")
    FileRewriter("single", HEADER).rewrite(str(target))
    assert f"Updated {target}" in [m.strip() for m in messages]


def test_quiet_suppresses_progress(tmp_path, messages):
    target = write(tmp_path / "main.go", b"package main\n")
    FileRewriter("single", HEADER, quiet=True).rewrite(target)
    assert not any(m.startswith("Updated") for m in messages)


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------


def test_missing_file_raises_filesystem_error(tmp_path):
    missing = tmp_path / "missing.go"
    with pytest.raises(FileSystemError) as exc_info:
        FileRewriter("single", HEADER).rewrite(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert str(missing) in exc_info.value.message


def test_write_failure_raises_filesystem_error(tmp_path):
    target = write(tmp_path / "main.go", b"package main\n")
    real_open = builtins.open

    def fake_open(file, mode="r", *args, **kwargs):
        if "w" in mode:
            raise PermissionError(13, "Permission denied", str(file))
        return real_open(file, mode, *args, **kwargs)

    with patch("copyrighter.core.rewriter.file_rewriter.open", fake_open, create=True):
        with pytest.raises(FileSystemError) as exc_info:
            FileRewriter("single", HEADER).rewrite(target)

    assert isinstance(exc_info.value.cause, PermissionError)
    assert target.read_bytes() == b"package main\n"
