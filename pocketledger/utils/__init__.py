"""Mini README: Utility helper functions for pocketledger.

Currently exports the entry point loader used to discover optional storage
backends at runtime.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
