"""System clipboard access through the platform's copy tools."""

import logging
import shutil
import subprocess
import sys
from typing import Optional

logger = logging.getLogger(__name__)

# Copy commands per platform, tried in order
_CANDIDATES: dict[str, list[list[str]]] = {
    "darwin": [["pbcopy"]],
    "win32": [["clip"]],
    "linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
}


class ClipboardError(Exception):
    """Raised when text cannot be written to the clipboard."""


def find_copy_command(platform: Optional[str] = None) -> Optional[list[str]]:
    """Find the first available copy command for the platform.

    Args:
        platform: Platform name as in sys.platform. Defaults to the current one.

    Returns:
        Command argv, or None if no tool is installed.
    """
    platform = platform or sys.platform
    key = "linux" if platform.startswith(("linux", "freebsd", "openbsd")) else platform
    for cmd in _CANDIDATES.get(key, []):
        if shutil.which(cmd[0]):
            return cmd
    return None


class SystemClipboard:
    """Clipboard backed by pbcopy/wl-copy/xclip/xsel/clip."""

    def __init__(self, command: Optional[list[str]] = None, timeout: float = 5.0):
        """Initialize the clipboard.

        Args:
            command: Explicit copy command. Detected on first use if omitted.
            timeout: Seconds to wait for the copy tool.
        """
        self._command = command
        self._timeout = timeout

    def copy(self, text: str) -> None:
        """Write text to the clipboard.

        Raises:
            ClipboardError: If no copy tool is available or it fails.
        """
        command = self._command or find_copy_command()
        if command is None:
            raise ClipboardError("no clipboard tool found (install xclip, xsel or wl-copy)")
        logger.debug("Copying %d chars with %s", len(text), command[0])
        try:
            subprocess.run(
                command,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                timeout=self._timeout,
                check=True,
            )
        except FileNotFoundError as e:
            raise ClipboardError(f"{command[0]} not found") from e
        except subprocess.TimeoutExpired as e:
            raise ClipboardError(f"{command[0]} timed out") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            raise ClipboardError(stderr or f"{command[0]} exited with code {e.returncode}") from e
