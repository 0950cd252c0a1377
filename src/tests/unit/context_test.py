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

from dataclasses import FrozenInstanceError, fields

import pytest

from copyrighter.context import GlobalConfig, StampContext, StampResult
from copyrighter.core.data.comment_style import CommentStyle
from copyrighter.core.exceptions import FileSystemError

# -----------------------------------------------------------------------------
# GlobalConfig Tests
# -----------------------------------------------------------------------------


def test_global_config_defaults():
    config = GlobalConfig()
    assert config.template is None
    assert config.extensions == "go"
    assert config.style == "single"
    assert config.years is None
    assert config.authors is None
    assert config.quiet is False
    assert config.debug is False
    assert config.on_error == "abort"


def test_every_field_has_a_description():
    assert {f.name for f in fields(GlobalConfig)} == set(GlobalConfig.descriptions)


# -----------------------------------------------------------------------------
# StampContext / StampResult Tests
# -----------------------------------------------------------------------------


def test_stamp_context_is_immutable():
    context = StampContext(
        header="// h\n",
        style=CommentStyle.SINGLE,
        extensions=frozenset({".go"}),
        targets=(".",),
    )
    with pytest.raises(FrozenInstanceError):
        context.quiet = True


def test_stamp_context_error_policy():
    context = StampContext(
        header="",
        style=CommentStyle.HASH,
        extensions=frozenset({".py"}),
        targets=(".",),
        on_error="continue",
    )
    assert context.continue_on_error is True


def test_stamp_result_counts():
    result = StampResult()
    assert result.success
    result.updated.append("a.go")
    result.failed.append(("b.go", FileSystemError("boom")))
    assert result.total == 2
    assert not result.success
