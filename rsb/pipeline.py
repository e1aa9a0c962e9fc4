"""
Pipeline

The two operations offered to callers (CLI, servers, scripts):
- load_and_validate: path -> Resume
- load_and_render: path -> HTML string

Both raise a single ResumeError subclass on failure and never return a partial
result.
"""

from pathlib import Path
from typing import Optional, Union

from rsb.contexts.rendering.html_generator import HTMLGenerator
from rsb.contexts.schema.formats import from_file
from rsb.contexts.schema.resume_data_structure import Resume
from rsb.utils.settings import RenderOptions


def load_and_validate(path: Union[Path, str]) -> Resume:
    """
    Load a resume file and check that it decodes.

    Args:
        path: Input file (.json, .json5, .yaml, .yml, .ron, .jsonnet)

    Returns:
        Decoded Resume

    Raises:
        ResumeError: UnknownFormatError, ResumeIOError, DecodeError, DateError
            or EvaluationError
    """
    return from_file(path)


def load_and_render(path: Union[Path, str], options: Optional[RenderOptions] = None) -> str:
    """
    Load a resume file and render it to HTML.

    Args:
        path: Input file
        options: Render options

    Returns:
        HTML document

    Raises:
        ResumeError: Same failures as load_and_validate
    """
    resume = from_file(path)
    return HTMLGenerator(options).render(resume).html
