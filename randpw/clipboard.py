"""
randpw.clipboard
Copy generated passwords to the system clipboard by piping them to the
platform's clipboard tool, which keeps the contents after randpw exits.
"""

import platform
import shutil
import subprocess
from typing import List

from .errors import ClipboardError

# tried in order on Linux and other X11/Wayland systems
_UNIX_TOOLS = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def clipboard_command() -> List[str]:
    system = platform.system()
    if system == "Darwin":
        return ["pbcopy"]
    if system == "Windows":
        return ["clip"]
    for cmd in _UNIX_TOOLS:
        if shutil.which(cmd[0]):
            return cmd
    raise ClipboardError("no clipboard tool found (install wl-clipboard, xclip or xsel)")


def copy_text(text: str) -> None:
    cmd = clipboard_command()
    try:
        subprocess.run(cmd, input=text, universal_newlines=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise ClipboardError(f"Could not copy to clipboard: {e}") from e
