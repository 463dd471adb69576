"""
templine - line-oriented HTML template engine

Classifies template lines into literal, variable, or directive content and
renders them against a variable context.
"""

__version__ = "1.0.0"

from .parser import FormatError, conditional_parse, condition_parse
from .classifier import content_classify
from .expression import placeholders_extract
from .generator import ContextLookupError, content_render, line_render, lines_render
from .context import ContextError, context_load
from .log import LOG, state_connectToLogger

__all__ = [
    "FormatError",
    "ContextLookupError",
    "ContextError",
    "content_classify",
    "conditional_parse",
    "condition_parse",
    "placeholders_extract",
    "content_render",
    "line_render",
    "lines_render",
    "context_load",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
