"""Shared fixtures for genfields tests.

Go sources are written into pytest's tmp_path so the generator can scan a
real directory. Tests that compile the generated code need the go
toolchain and are skipped when it is not installed.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable

import pytest

from go_samples import IPINFO_SOURCE, TESTDATA


@pytest.fixture
def write_go(tmp_path) -> Callable[..., Path]:
    """Write Go source into tmp_path and return the file path.

    Usage::

        path = write_go(IPINFO_SOURCE)             # tmp_path/ipinfo.go
        write_go("package x\\n", name="other.go")
    """
    def _write(source: str, name: str = "ipinfo.go") -> Path:
        path = tmp_path / name
        path.write_text(source)
        return path
    return _write


@pytest.fixture
def ipinfo_dir(tmp_path, write_go) -> Path:
    """A package directory holding the sample ipinfo.go."""
    write_go(IPINFO_SOURCE)
    return tmp_path


# ---------------------------------------------------------------------------
# Go toolchain — skip integration tests if it isn't installed
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def go_binary() -> str:
    """Path to the go command, or skip."""
    go = shutil.which("go")
    if go is None:
        pytest.skip("go toolchain not installed")
    return go


@pytest.fixture(scope="session")
def go_env(go_binary, tmp_path_factory) -> dict[str, str]:
    """Environment for running go with writable caches and no downloads."""
    cache = tmp_path_factory.mktemp("gocache")
    env = dict(os.environ)
    env.update({
        "GOCACHE": str(cache / "build"),
        "GOPATH": str(cache / "path"),
        "GOTOOLCHAIN": "local",
        "GOFLAGS": "-mod=mod",
        "GO111MODULE": "on",
    })
    return env


@pytest.fixture
def go_module(tmp_path) -> Path:
    """Copy the stub client module (testdata/goclient) into tmp_path."""
    module = tmp_path / "goclient"
    shutil.copytree(TESTDATA / "goclient", module)
    return module


@pytest.fixture
def run_go(go_binary, go_env) -> Callable[..., subprocess.CompletedProcess]:
    """Run a go subcommand in a directory, capturing output."""
    def _run(directory: Path, *args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [go_binary, *args],
            cwd=directory,
            env=go_env,
            capture_output=True,
            text=True,
            timeout=300,
        )
    return _run
