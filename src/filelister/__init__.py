from __future__ import annotations

"""
FileLister.

Enumerates a filesystem path, optionally recursively, and renders the
resulting hierarchy as indented text, JSON or YAML.
"""

__version__ = "1.0.0"
