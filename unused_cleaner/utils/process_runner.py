"""Bounded subprocess execution with process-group cleanup.

Every external tool (npx detectors, npm, git) is run through run_bounded so
that a timeout kills the whole child process tree rather than only the
immediate child (npx spawns node, which may spawn further workers).
"""

import logging
import os
import signal
import subprocess
from pathlib import Path
from typing import List, Sequence

logger = logging.getLogger(__name__)

# Seconds to wait for pipes to drain after killing a timed-out process group
KILL_GRACE_SECONDS = 5.0


def _kill_process_tree(process: subprocess.Popen) -> None:
    """Kill a child and every process in its group."""
    if hasattr(os, "killpg"):
        try:
            os.killpg(process.pid, signal.SIGKILL)
            return
        except (ProcessLookupError, PermissionError):
            # Group already gone or not ours; fall back to the direct child
            pass
    process.kill()


def run_bounded(
    cmd: Sequence[str],
    cwd: Path,
    timeout: float,
    check: bool = False,
) -> subprocess.CompletedProcess:
    """Run a command to completion or until the timeout expires.

    The child runs in its own session (POSIX) or process group (Windows) so
    that it can be terminated as a unit.

    Args:
        cmd: Command and arguments (no shell interpretation).
        cwd: Working directory for the command.
        timeout: Maximum run time in seconds. Required.
        check: If True, raise CalledProcessError on non-zero exit.

    Returns:
        subprocess.CompletedProcess with returncode, stdout and stderr (text).

    Raises:
        FileNotFoundError: If the executable cannot be found.
        TimeoutError: If the command exceeds the timeout (process tree killed).
        subprocess.CalledProcessError: If check=True and the exit code is non-zero.
    """
    args: List[str] = [str(part) for part in cmd]
    popen_kwargs = {}
    if os.name == "nt":
        popen_kwargs["creationflags"] = subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        popen_kwargs["start_new_session"] = True

    logger.debug(f"Running: {' '.join(args)} (cwd={cwd}, timeout={timeout:.1f}s)")

    with subprocess.Popen(
        args,
        cwd=str(cwd),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        **popen_kwargs,
    ) as process:
        try:
            stdout, stderr = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            _kill_process_tree(process)
            try:
                process.communicate(timeout=KILL_GRACE_SECONDS)
            except subprocess.TimeoutExpired:
                logger.warning(f"Process {process.pid} did not exit after kill")
            raise TimeoutError(
                f"Command '{' '.join(args)}' timed out after {timeout:.1f} seconds"
            ) from e

    result = subprocess.CompletedProcess(args, process.returncode, stdout, stderr)
    if check:
        result.check_returncode()
    return result
