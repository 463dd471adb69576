"""
Models package for templine

Contains the classified-content data structures and the CLI pipeline state.
"""

from .state import ProgramState, pipeline
from .content import (
    Content,
    Context,
    Literal,
    Variable,
    Directive,
    Unrecognized,
    Expression,
    ForTag,
    IfTag,
    Conditional,
    Condition,
    Equal,
    In,
    Unsupported,
    RenderedLine,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "Content",
    "Context",
    "Literal",
    "Variable",
    "Directive",
    "Unrecognized",
    "Expression",
    "ForTag",
    "IfTag",
    "Conditional",
    "Condition",
    "Equal",
    "In",
    "Unsupported",
    "RenderedLine",
]
