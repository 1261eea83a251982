"""Pytest configuration and fixtures for desktop-entry tests."""

import logging

import pytest

from desktop_entry.logger import setup_logging

FIREFOX_DESKTOP = """\
[Desktop Entry]
Type=Application
Name=Firefox
Name[de]=Feuerfuchs
Exec=firefox %u
Categories=Network;WebBrowser;
"""

FULL_DESKTOP = """\
# Full example with actions and vendor keys
[Desktop Entry]
Version=1.5
Type=Application
Name=Text Editor
Name[de]=Texteditor
Name[sr@latin]=Uređivač teksta
GenericName=Editor
Comment=Edit text files
Comment[fr]=Modifier des fichiers texte
Icon=org.example.Editor
Exec=editor %F
TryExec=editor
Terminal=false
StartupNotify=true
MimeType=text/plain;text/x-python;
Categories=Utility;TextEditor;
Keywords=text;editor;
Keywords[de]=Text;Editor;
Actions=new-window;preferences;
X-GNOME-UsesNotifications=true
X-Vendor-Note=keep\\smy spacing

[Desktop Action new-window]
Name=New Window
Name[de]=Neues Fenster
Exec=editor --new-window

[Desktop Action preferences]
Name=Preferences
Icon=preferences-system
Exec=editor --preferences
X-Action-Flag=1

[X-Vendor Data]
Key=value
Other[de]=Wert
"""


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    setup_logging()
    original_propagation = {}
    for name, existing in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("desktop_entry") and isinstance(
            existing, logging.Logger
        ):
            logger = existing
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def firefox_text() -> str:
    """Minimal Application entry with one translation."""
    return FIREFOX_DESKTOP


@pytest.fixture
def full_text() -> str:
    """Application entry with actions, keywords and passthrough data."""
    return FULL_DESKTOP
