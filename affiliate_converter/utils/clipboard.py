"""
Clipboard helper.

Copies text to the system clipboard via pyperclip. When pyperclip has no
clipboard mechanism on this system, falls back to a hidden Tk window that is
created and destroyed within the call.

The fallback reports success once Tk reads the text back, before the window
is destroyed. On X11 the Tk window owns the CLIPBOARD selection, so the
text only outlives the window when a clipboard manager takes ownership of
it; without one, other applications may find the clipboard empty.
"""

import asyncio
import logging

import pyperclip

logger = logging.getLogger(__name__)


def _create_staging_window():
    """Create a withdrawn (invisible) Tk root window."""
    import tkinter

    root = tkinter.Tk()
    root.withdraw()
    return root


def _copy_with_staging_window(text: str) -> bool:
    """
    Copy text through a transient Tk window.

    The window is always destroyed before returning.

    Returns:
        True if the clipboard holds ``text`` afterwards.
    """
    window = _create_staging_window()
    try:
        window.clipboard_clear()
        window.clipboard_append(text)
        window.update()
        return window.clipboard_get() == text
    finally:
        window.destroy()


async def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy.

    Returns:
        True on success, False on any failure.
    """
    try:
        try:
            await asyncio.to_thread(pyperclip.copy, text)
            return True
        except pyperclip.PyperclipException as e:
            logger.debug(f"System clipboard unavailable ({e}), using fallback")

        return await asyncio.to_thread(_copy_with_staging_window, text)
    except Exception as e:
        logger.error(f"Failed to copy text to clipboard: {e}")
        return False
