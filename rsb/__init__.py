"""
RSB - Resume Site Builder

Turns a JSON Resume style document (JSON/JSON5, YAML, RON or Jsonnet) into a
static HTML page.

Architecture:
- Schema Context: partial dates, the canonical resume model, format dispatch
- Rendering Context: HTML generation with per-field degradation
"""

__version__ = "0.1.0"
