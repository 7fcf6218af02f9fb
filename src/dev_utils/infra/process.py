"""Process control helpers: run external tools and clean up on interrupt."""

import platform
import subprocess
import threading
from pathlib import Path
from typing import Optional, Sequence, Set

from ..domain.models import CommandResult


IS_WINDOWS = platform.system() == "Windows"
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126

_active_processes: Set[subprocess.Popen] = set()
_active_processes_lock = threading.Lock()


def start_tracked_process(command, **kwargs) -> subprocess.Popen:
    """Start a subprocess and track it for interrupt cleanup."""
    process = subprocess.Popen(command, **kwargs)
    with _active_processes_lock:
        _active_processes.add(process)
    return process


def untrack_process(process: subprocess.Popen) -> None:
    """Remove process from tracked set."""
    with _active_processes_lock:
        _active_processes.discard(process)


def terminate_process(process: subprocess.Popen, timeout: float = 2.0) -> None:
    """Terminate a process (and children on Windows) best-effort."""
    if process.poll() is not None:
        return

    try:
        if IS_WINDOWS:
            subprocess.run(
                ["taskkill", "/F", "/T", "/PID", str(process.pid)],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        else:
            process.terminate()
    except OSError:
        pass

    try:
        process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        process.kill()


def terminate_all_tracked_processes() -> None:
    """Terminate all tracked subprocesses best-effort."""
    with _active_processes_lock:
        processes = list(_active_processes)

    for process in processes:
        terminate_process(process)
        untrack_process(process)


def run_command(
    command: Sequence[str],
    cwd: Optional[Path] = None,
    capture: bool = True,
    input_text: Optional[str] = None,
) -> CommandResult:
    """Run a command to completion and return its result.

    Args:
        command: program and arguments
        cwd: working directory (defaults to the current one)
        capture: capture stdout/stderr; when False the child inherits the
            terminal so interactive tools (terraform apply) can prompt
        input_text: text fed to stdin

    Returns:
        CommandResult; a missing program yields return code 127 and any other
        launch failure (e.g. permission denied) 126 instead of raising. There
        is no timeout: the call blocks until the child exits.
    """
    pipe = subprocess.PIPE if capture else None
    stdin = subprocess.PIPE if input_text is not None else None

    try:
        process = start_tracked_process(
            list(command),
            cwd=str(cwd) if cwd is not None else None,
            stdin=stdin,
            stdout=pipe,
            stderr=pipe,
            text=True,
        )
    except FileNotFoundError:
        return CommandResult(COMMAND_NOT_FOUND, "", f"{command[0]}: command not found")
    except OSError as e:
        return CommandResult(COMMAND_NOT_EXECUTABLE, "", f"{command[0]}: {e}")

    try:
        stdout, stderr = process.communicate(input=input_text)
    except KeyboardInterrupt:
        terminate_process(process)
        raise
    finally:
        untrack_process(process)

    return CommandResult(process.returncode, stdout or "", stderr or "")
