"""
Clipboard Export

Copies the exported JSON to the system clipboard using whichever platform
clipboard command is installed. Without one, the text is written to a
stream (stdout by default) so it can be copied by hand.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)

# Tried in order; the first one found on PATH is used
CLIPBOARD_COMMANDS: List[List[str]] = [
    ['pbcopy'],                             # macOS
    ['wl-copy'],                            # Wayland
    ['xclip', '-selection', 'clipboard'],   # X11
    ['xsel', '--clipboard', '--input'],     # X11
    ['clip'],                               # Windows
]

STREAM_METHOD = 'stream'


def find_clipboard_command() -> Optional[List[str]]:
    """Return the first available clipboard command, or None."""
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str, stream: Optional[TextIO] = None) -> str:
    """
    Put text on the clipboard.

    Args:
        text: Text to copy
        stream: Fallback output when no clipboard command works (default: stdout)

    Returns:
        Name of the clipboard command used, or 'stream' for the fallback
    """
    command = find_clipboard_command()
    if command is not None:
        try:
            subprocess.run(command, input=text, text=True, check=True, timeout=5)
            logger.debug("Copied %d chars with %s", len(text), command[0])
            return command[0]
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Clipboard command %s failed: %s", command[0], e)

    out = stream or sys.stdout
    out.write(text)
    if not text.endswith('\n'):
        out.write('\n')
    logger.info("No clipboard available, wrote JSON to output for manual copy")
    return STREAM_METHOD
