# =============================
# FILE: thesis_topics/credentials.py
# =============================
"""
Credential (API key) selection capabilities.

The request flow receives one of these at construction. ``available`` tells
whether the hosting environment can select a key at all; ``select()`` either
installs a new key into the process environment or raises
CredentialSelectionError.
"""
import importlib.util
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from .errors import CredentialSelectionError
from .llm.client import API_KEY_ENV
from . import messages


class CredentialSelector:
    available: bool = True

    def select(self) -> None:
        raise NotImplementedError


class UnavailableCredentialSelector(CredentialSelector):
    """The environment offers no way to pick a key interactively."""
    available = False

    def select(self) -> None:
        raise CredentialSelectionError("Credential selection is not available in this environment.")


class DialogCredentialSelector(CredentialSelector):
    """Ask for the key in a native masked-input dialog."""

    def __init__(self, env_var: str = API_KEY_ENV):
        self.env_var = env_var

    @property
    def available(self) -> bool:
        return importlib.util.find_spec("tkinter") is not None

    def select(self) -> None:
        try:
            import tkinter as tk
            from tkinter import simpledialog
        except ImportError as e:
            raise CredentialSelectionError("tkinter is not installed") from e

        try:
            # Create root window but don't show it
            root = tk.Tk()
            root.withdraw()
            root.attributes('-topmost', True)
            try:
                key = simpledialog.askstring(
                    messages.CREDENTIAL_DIALOG_TITLE,
                    messages.CREDENTIAL_DIALOG_PROMPT,
                    show="*",
                    parent=root,
                )
            finally:
                root.destroy()
        except tk.TclError as e:
            raise CredentialSelectionError(f"Could not open the key dialog: {e}") from e

        if not key or not key.strip():
            raise CredentialSelectionError("No API key was entered.")
        os.environ[self.env_var] = key.strip()
        logger.info(f"{self.env_var} updated from dialog")


class DotenvCredentialSelector(CredentialSelector):
    """Re-read the key from a .env file, overriding the current value."""

    def __init__(self, dotenv_path: Optional[str] = None, env_var: str = API_KEY_ENV):
        self.dotenv_path = dotenv_path
        self.env_var = env_var

    def select(self) -> None:
        path = self.dotenv_path or find_dotenv(usecwd=True)
        if not path or not Path(path).is_file():
            raise CredentialSelectionError(".env file not found")
        load_dotenv(path, override=True)
        if not os.getenv(self.env_var):
            raise CredentialSelectionError(f"{self.env_var} is not set in {path}")
        logger.info(f"{self.env_var} reloaded from {path}")


_SELECTORS = {
    "dialog": DialogCredentialSelector,
    "dotenv": DotenvCredentialSelector,
    "none": UnavailableCredentialSelector,
}


def get_credential_selector(name: Optional[str] = None) -> CredentialSelector:
    """Build the selector named by ``name`` or the CREDENTIAL_SELECTOR setting."""
    name = (name or os.getenv("CREDENTIAL_SELECTOR") or "dialog").strip().lower()
    try:
        return _SELECTORS[name]()
    except KeyError:
        raise ValueError(f"Unknown credential selector '{name}'. Expected one of: {', '.join(_SELECTORS)}") from None
