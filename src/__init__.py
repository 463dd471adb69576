"""
templine - line-oriented HTML template engine

Renders {{variable}} interpolation and single-line {% if %} / {% for %}
directives against a name -> values context, one line at a time.
"""

__version__ = "1.0.0"

from .lib import (
    FormatError,
    ContextLookupError,
    content_classify,
    line_render,
    lines_render,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "FormatError",
    "ContextLookupError",
    "content_classify",
    "line_render",
    "lines_render",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
