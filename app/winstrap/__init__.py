"""winstrap - bootstrap a Windows machine for cross-platform dotfiles."""

__version__ = "0.1.0"
