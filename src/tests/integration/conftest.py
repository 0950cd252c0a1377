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

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2]


def run_cli(args, cwd, env=None, state_dir=None):
    """Run the copyrighter CLI in a subprocess and capture its output."""
    run_env = {
        k: v for k, v in os.environ.items() if not k.startswith("COPYRIGHTER_")
    }
    run_env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(SRC_DIR), run_env.get("PYTHONPATH")])
    )
    if state_dir is not None:
        # keep log files out of the real user log directory
        run_env["XDG_STATE_HOME"] = str(state_dir)
    if env:
        run_env.update(env)

    return subprocess.run(
        [sys.executable, "-m", "copyrighter", *args],
        cwd=cwd,
        env=run_env,
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.fixture
def temp_dir(tmp_path):
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def cli(tmp_path, temp_dir):
    state_dir = tmp_path / "state"

    def _run(args, cwd=None, env=None):
        return run_cli(args, cwd or temp_dir, env=env, state_dir=state_dir)

    return _run
