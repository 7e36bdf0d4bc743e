#!/usr/bin/env python3
"""
DOCK2KUBE TEXT SOURCES
----------------------
Where the `docker run` text comes from. The clipboard implementation is
picked once per process by `select_clipboard()`; the rest of the tool only
sees the TextSource interface.

Clipboard tools used:
- linux:  xsel -b -o / xsel -b -i
- darwin: pbpaste / pbcopy
- win32:  powershell Get-Clipboard / Set-Clipboard
"""

import logging
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

logger = logging.getLogger("dock2kube.clipboard")


class TextSource(ABC):
    """Capability interface for acquiring the command text."""

    @abstractmethod
    def read_text(self) -> str:
        ...


class LiteralSource(TextSource):
    """Text passed directly on the command line."""

    def __init__(self, text: str):
        self.text = text

    def read_text(self) -> str:
        return self.text


class StdinSource(TextSource):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def read_text(self) -> str:
        return (self.stream or sys.stdin).read()


class ClipboardSource(TextSource):
    """Reads and writes the OS clipboard through an external command."""

    os_name = ""
    read_cmd: List[str] = []
    write_cmd: List[str] = []

    def _run(self, cmd: List[str], data: Optional[str] = None) -> str:
        logger.debug(f"Running clipboard command: {cmd}")
        try:
            completed = subprocess.run(
                cmd, input=data, capture_output=True, text=True, check=True
            )
        except FileNotFoundError:
            raise RuntimeError(f"Clipboard tool '{cmd[0]}' is not installed")
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"Clipboard command {cmd[0]} failed: {e.stderr.strip()}")
        except UnicodeDecodeError as e:
            raise RuntimeError(f"Clipboard command {cmd[0]} returned undecodable text: {e}")
        return completed.stdout

    def read_text(self) -> str:
        return self._run(self.read_cmd)

    def write_text(self, data: str) -> None:
        self._run(self.write_cmd, data)


class LinuxClipboard(ClipboardSource):
    os_name = "linux"
    read_cmd = ["xsel", "-b", "-o"]
    write_cmd = ["xsel", "-b", "-i"]


class DarwinClipboard(ClipboardSource):
    os_name = "darwin"
    read_cmd = ["pbpaste"]
    write_cmd = ["pbcopy"]


class WindowsClipboard(ClipboardSource):
    os_name = "win32"
    read_cmd = ["powershell", "-noprofile", "-command", "Get-Clipboard"]
    write_cmd = ["powershell", "-noprofile", "-command", "$input|Set-Clipboard"]

    def read_text(self) -> str:
        data = super().read_text().replace("\r", "")
        return data[:-1] if data.endswith("\n") else data


CLIPBOARDS = {
    "linux": LinuxClipboard,
    "darwin": DarwinClipboard,
    "win32": WindowsClipboard,
}


def select_clipboard(platform: Optional[str] = None) -> ClipboardSource:
    """Returns the clipboard implementation for `platform` (default: sys.platform)."""
    platform = platform or sys.platform
    clipboard_cls = CLIPBOARDS.get(platform)
    if clipboard_cls is None:
        raise RuntimeError(f"Clipboard: unsupported OS: {platform}")
    return clipboard_cls()
