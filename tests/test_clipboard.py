"""
Tests for the clipboard helper.
"""

import pyperclip
import pytest

from affiliate_converter.utils import clipboard


class FakeStagingWindow:
    """Stands in for a withdrawn Tk root window."""

    def __init__(self, fail_on_append: bool = False, read_back: str | None = None):
        self.fail_on_append = fail_on_append
        self.read_back = read_back
        self.contents = ""
        self.destroyed = False
        self.calls = []

    def clipboard_clear(self):
        self.contents = ""

    def clipboard_append(self, text):
        if self.fail_on_append:
            raise RuntimeError("clipboard locked")
        self.contents += text

    def update(self):
        pass

    def clipboard_get(self):
        self.calls.append("clipboard_get")
        return self.contents if self.read_back is None else self.read_back

    def destroy(self):
        self.calls.append("destroy")
        self.destroyed = True


def _pyperclip_unavailable(text):
    raise pyperclip.PyperclipException("no clipboard mechanism")


class TestCopyToClipboard:
    @pytest.mark.anyio
    async def test_primary_clipboard(self, monkeypatch) -> None:
        copied = []
        monkeypatch.setattr(clipboard.pyperclip, "copy", copied.append)

        def no_window():
            raise AssertionError("fallback should not be used")

        monkeypatch.setattr(clipboard, "_create_staging_window", no_window)

        assert await clipboard.copy_to_clipboard("https://www.amazon.com/dp/B08N5WRWNW?tag=t") is True
        assert copied == ["https://www.amazon.com/dp/B08N5WRWNW?tag=t"]

    @pytest.mark.anyio
    async def test_fallback_when_primary_unavailable(self, monkeypatch) -> None:
        window = FakeStagingWindow()
        monkeypatch.setattr(clipboard.pyperclip, "copy", _pyperclip_unavailable)
        monkeypatch.setattr(clipboard, "_create_staging_window", lambda: window)

        assert await clipboard.copy_to_clipboard("hello") is True
        assert window.contents == "hello"
        assert window.destroyed

    @pytest.mark.anyio
    async def test_fallback_confirms_copy_before_destroying_window(self, monkeypatch) -> None:
        window = FakeStagingWindow()
        monkeypatch.setattr(clipboard.pyperclip, "copy", _pyperclip_unavailable)
        monkeypatch.setattr(clipboard, "_create_staging_window", lambda: window)

        assert await clipboard.copy_to_clipboard("hello") is True
        assert window.calls == ["clipboard_get", "destroy"]

    def test_module_documents_x11_selection_ownership(self) -> None:
        assert "clipboard manager" in clipboard.__doc__
        assert "X11" in clipboard.__doc__

    @pytest.mark.anyio
    async def test_fallback_unconfirmed_copy_returns_false(self, monkeypatch) -> None:
        window = FakeStagingWindow(read_back="something else")
        monkeypatch.setattr(clipboard.pyperclip, "copy", _pyperclip_unavailable)
        monkeypatch.setattr(clipboard, "_create_staging_window", lambda: window)

        assert await clipboard.copy_to_clipboard("hello") is False
        assert window.destroyed

    @pytest.mark.anyio
    async def test_fallback_error_returns_false_and_cleans_up(self, monkeypatch) -> None:
        window = FakeStagingWindow(fail_on_append=True)
        monkeypatch.setattr(clipboard.pyperclip, "copy", _pyperclip_unavailable)
        monkeypatch.setattr(clipboard, "_create_staging_window", lambda: window)

        assert await clipboard.copy_to_clipboard("hello") is False
        assert window.destroyed

    @pytest.mark.anyio
    async def test_no_display_for_fallback_returns_false(self, monkeypatch) -> None:
        def no_display():
            raise RuntimeError("no display name and no $DISPLAY environment variable")

        monkeypatch.setattr(clipboard.pyperclip, "copy", _pyperclip_unavailable)
        monkeypatch.setattr(clipboard, "_create_staging_window", no_display)

        assert await clipboard.copy_to_clipboard("hello") is False

    @pytest.mark.anyio
    async def test_primary_failure_returns_false(self, monkeypatch) -> None:
        def broken(text):
            raise OSError("write failed")

        monkeypatch.setattr(clipboard.pyperclip, "copy", broken)

        assert await clipboard.copy_to_clipboard("hello") is False
