"""
Shared utilities for RSB.

Common functionality used across contexts:
- Logger setup
- Settings loading
- RON parsing
- Timestamps
"""

from rsb.utils.settings import RenderOptions, Settings, load_settings
from rsb.utils.timestamp import today

__all__ = ["RenderOptions", "Settings", "load_settings", "today"]
