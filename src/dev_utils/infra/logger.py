# Logging module: unified colored console output
#
# Main features:
#   - log_info(): informational line
#   - log_success(): success line
#   - log_error(): error line (stderr)
#   - log_warning(): warning line (stderr)
#   - use_stderr(): route every log line to stderr (JSON-lines mode)
#
# Features:
#   - timestamped
#   - colored when the terminal supports it

import os
import sys
from datetime import datetime

import colorama

colorama.just_fix_windows_console()

# ANSI color codes
COLOR_RESET = '\033[0m'
COLOR_INFO = '\033[0;36m'      # cyan
COLOR_SUCCESS = '\033[0;32m'   # green
COLOR_ERROR = '\033[0;31m'     # red
COLOR_WARNING = '\033[0;33m'   # yellow

_route_to_stderr = False


def use_stderr(enabled: bool = True) -> None:
    """Send info/success lines to stderr too, leaving stdout for data."""
    global _route_to_stderr
    _route_to_stderr = enabled


def _get_timestamp() -> str:
    """Current timestamp"""
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _use_color(stream) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def _format_message(level: str, color: str, message: str, stream) -> str:
    """Format a log line"""
    timestamp = _get_timestamp()
    if _use_color(stream):
        return f"{color}[{level}]{COLOR_RESET} [{timestamp}] {message}"
    return f"[{level}] [{timestamp}] {message}"


def _emit(level: str, color: str, message: str, to_stderr: bool) -> None:
    stream = sys.stderr if (to_stderr or _route_to_stderr) else sys.stdout
    print(_format_message(level, color, message, stream), file=stream)


def log_info(message: str) -> None:
    """Informational line"""
    _emit("INFO", COLOR_INFO, message, to_stderr=False)


def log_success(message: str) -> None:
    """Success line"""
    _emit("SUCCESS", COLOR_SUCCESS, message, to_stderr=False)


def log_error(message: str) -> None:
    """Error line (stderr)"""
    _emit("ERROR", COLOR_ERROR, message, to_stderr=True)


def log_warning(message: str) -> None:
    """Warning line (stderr)"""
    _emit("WARNING", COLOR_WARNING, message, to_stderr=True)


def banner(message: str, color: str = COLOR_INFO) -> None:
    """Print a blank-line framed banner, used before terraform runs."""
    stream = sys.stderr if _route_to_stderr else sys.stdout
    if _use_color(stream):
        print(f"\n{color}{message}{COLOR_RESET}\n", file=stream)
    else:
        print(f"\n{message}\n", file=stream)
