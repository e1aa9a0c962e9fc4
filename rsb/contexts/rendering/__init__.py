"""
Rendering Context

Responsibilities:
- Renders a decoded Resume into a static HTML document
- Applies the per-field degradation policy (skip item / ignore field, with notices)
- Owns HTML templates and the bundled stylesheet

Owns: HTML generation, escaping, section layout
Never: Reads files or decodes input formats
"""

from rsb.contexts.rendering.html_generator import (
    HTMLGenerator,
    NoticeKind,
    RenderNotice,
    RenderResult,
    Section,
    SectionKind,
    render_html,
    sections_of,
)

__all__ = [
    "HTMLGenerator",
    "NoticeKind",
    "RenderNotice",
    "RenderResult",
    "Section",
    "SectionKind",
    "render_html",
    "sections_of",
]
