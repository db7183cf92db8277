"""Platform folder openers."""

import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional


class FolderOpener(str, Enum):
    """Host command that opens a folder in the desktop file manager."""

    MAC = "open"
    WINDOWS = "start"
    POSIX = "xdg-open"

    @classmethod
    def for_platform(cls, platform: Optional[str] = None) -> "FolderOpener":
        """Pick the opener for ``platform`` (default: ``sys.platform``).

        darwin -> open, win32 -> start, anything else -> xdg-open
        """
        platform = platform or sys.platform
        if platform == "darwin":
            return cls.MAC
        if platform == "win32":
            return cls.WINDOWS
        return cls.POSIX

    def command(self, path: Path) -> List[str]:
        """Argument vector that opens ``path``."""
        if self is FolderOpener.WINDOWS:
            # start is a cmd builtin; the empty string is the window title
            return ["cmd", "/c", "start", "", str(path)]
        return [self.value, str(path)]
