"""Shared helpers for generator tests."""

import asyncio
import os
import pathlib
import sys

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]


async def run_cli(*args: str, timeout: float = 10.0):
    """Run ``python -m measurements`` with args. Returns (returncode, stdout, stderr)."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [str(REPO_ROOT), env.get("PYTHONPATH", "")] if p
    )
    proc = await asyncio.create_subprocess_exec(
        sys.executable, "-m", "measurements", *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        env=env,
    )
    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        raise
    return proc.returncode, stdout.decode(), stderr.decode()


def read_lines(path: pathlib.Path):
    """Split a generated file into lines, checking every one ends in a newline."""
    data = path.read_bytes().decode("utf-8")
    if not data:
        return []
    assert data.endswith("\n")
    assert "\r" not in data
    return data[:-1].split("\n")
