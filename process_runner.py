# process_runner.py
import logging
import subprocess
import time
from dataclasses import dataclass
from typing import List

log = logging.getLogger(__name__)


class LaunchError(RuntimeError):
    """The command could not be started at all (not found, not executable...)."""


@dataclass(frozen=True)
class ExecutionResult:
    duration_seconds: float
    exit_code: int
    stdout_text: str
    stderr_text: str


def decode_output(raw: bytes) -> str:
    # lossy on purpose: bad bytes become U+FFFD instead of failing the report
    return raw.decode("utf-8", errors="replace")


def run_command(command: str, args: List[str]) -> ExecutionResult:
    """
    Run `command` with `args` and wait for it to finish.
    stdout/stderr are captured separately and never echoed. A non-zero exit
    code is returned as data; only a failure to launch raises.
    """
    log.info("Running %s with %d argument(s)", command, len(args))
    start = time.monotonic()
    try:
        proc = subprocess.run(
            [command, *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        # ValueError: arguments the OS cannot take at all (embedded NUL)
        raise LaunchError(f"Failed to execute command: {e}") from e
    duration = time.monotonic() - start

    # negative return code means the child was killed by a signal
    exit_code = proc.returncode if proc.returncode >= 0 else 1
    log.info("Command exited with code %d after %.2fs", exit_code, duration)

    return ExecutionResult(
        duration_seconds=duration,
        exit_code=exit_code,
        stdout_text=decode_output(proc.stdout),
        stderr_text=decode_output(proc.stderr),
    )
