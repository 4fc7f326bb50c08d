"""Global error reporting for the compose editor UI"""
import sys
import logging
from PyQt5.QtWidgets import QMessageBox

# Running from source re-raises immediately; a frozen build shows a popup first
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('ComposeEditor')
_main_window = None

def set_main_window(window):
    """Set the main window used as parent for error popups"""
    global _main_window
    _main_window = window

def set_debug_mode(enabled: bool):
    """Override debug mode (the editor's --debug flag, tests)"""
    global DEBUG_MODE
    DEBUG_MODE = enabled

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception to the user, then re-raise it

    Args:
        e: The exception to handle
        user_message: User-friendly message for the popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Re-raises straight away (full traceback in the console)

    Otherwise:
        - Logs the traceback on the 'ComposeEditor' logger
        - Shows a critical popup with user_message or str(e)
        - Re-raises
    """
    if DEBUG_MODE:
        raise e

    _logger.error(f"{title}: {e}", exc_info=e)

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"Error popup (no window): {title} - {message}")

    raise e
