"""Cross-platform clipboard copy."""

import shutil
import sys
from typing import List, Optional

from .process import run_command


def get_copy_command() -> Optional[List[str]]:
    """Get the system-specific copy command.

    Returns:
        Command list for copying to clipboard, or None when no tool is available
    """
    if sys.platform == "win32":
        return ["clip"]
    if sys.platform == "darwin" and shutil.which("pbcopy"):
        return ["pbcopy"]
    # Linux - try xclip first, then xsel
    if shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard"]
    if shutil.which("xsel"):
        return ["xsel", "--clipboard", "--input"]
    return None


def copy_to_clipboard(text: str) -> Optional[str]:
    """Copy text to the clipboard.

    Args:
        text: Text to copy

    Returns:
        name of the tool used, or None if nothing was copied
    """
    if not text:
        return None

    cmd = get_copy_command()
    if cmd is None:
        return None

    result = run_command(cmd, input_text=text)
    return cmd[0] if result.ok else None
