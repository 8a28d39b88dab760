"""Turns a Fedora GNOME desktop into a macOS look-alike tuned for battery life."""

__version__ = "5.0.0"
