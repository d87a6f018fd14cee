"""TUI (Terminal User Interface) module for dutui.

Provides the stack-based size browser and the terminal surface it draws on.
"""
from .browser import Browser
from .keys import Key, classify_key
from .navigator import Navigator
from .surface import ConsoleSurface, Surface

__all__ = ["Browser", "ConsoleSurface", "Key", "Navigator", "Surface", "classify_key"]
