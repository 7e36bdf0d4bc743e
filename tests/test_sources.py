import io
import subprocess

import pytest

from dock2kube.sources import clipboard
from dock2kube.sources.clipboard import (
    DarwinClipboard, LinuxClipboard, LiteralSource, StdinSource, WindowsClipboard, select_clipboard,
)


class FakeRun:
    """Stands in for subprocess.run and records the commands it was given."""

    def __init__(self, stdout="", exc=None):
        self.stdout = stdout
        self.exc = exc
        self.calls = []

    def __call__(self, cmd, input=None, **kwargs):
        self.calls.append((cmd, input))
        if self.exc:
            raise self.exc
        return subprocess.CompletedProcess(cmd, 0, stdout=self.stdout, stderr="")


@pytest.mark.parametrize("platform, cls", [
    ("linux", LinuxClipboard),
    ("darwin", DarwinClipboard),
    ("win32", WindowsClipboard),
])
def test_select_clipboard(platform, cls):
    assert isinstance(select_clipboard(platform), cls)


def test_select_clipboard_unsupported():
    with pytest.raises(RuntimeError, match="unsupported OS"):
        select_clipboard("plan9")


def test_linux_read_uses_xsel(monkeypatch):
    fake = FakeRun(stdout="docker run nginx\n")
    monkeypatch.setattr(clipboard.subprocess, "run", fake)

    assert LinuxClipboard().read_text() == "docker run nginx\n"
    assert fake.calls == [(["xsel", "-b", "-o"], None)]


def test_windows_read_strips_cr_and_final_newline(monkeypatch):
    monkeypatch.setattr(clipboard.subprocess, "run", FakeRun(stdout="docker run\r\n nginx\r\n"))
    assert WindowsClipboard().read_text() == "docker run\n nginx"


def test_write_passes_data_on_stdin(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(clipboard.subprocess, "run", fake)

    DarwinClipboard().write_text("cd /x")
    assert fake.calls == [(["pbcopy"], "cd /x")]


def test_missing_tool_is_runtime_error(monkeypatch):
    monkeypatch.setattr(clipboard.subprocess, "run", FakeRun(exc=FileNotFoundError("xsel")))
    with pytest.raises(RuntimeError, match="not installed"):
        LinuxClipboard().read_text()


def test_failing_tool_is_runtime_error(monkeypatch):
    error = subprocess.CalledProcessError(1, ["pbpaste"], stderr="no display\n")
    monkeypatch.setattr(clipboard.subprocess, "run", FakeRun(exc=error))
    with pytest.raises(RuntimeError, match="no display"):
        DarwinClipboard().read_text()


def test_literal_and_stdin_sources():
    assert LiteralSource("docker run img").read_text() == "docker run img"
    assert StdinSource(io.StringIO("docker run img\n")).read_text() == "docker run img\n"


def test_undecodable_clipboard_is_runtime_error(monkeypatch):
    error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    monkeypatch.setattr(clipboard.subprocess, "run", FakeRun(exc=error))
    with pytest.raises(RuntimeError, match="undecodable"):
        LinuxClipboard().read_text()
