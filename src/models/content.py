"""
Content models for classified template lines

Each input line is classified into exactly one Content variant. Directive
variants own a Conditional whose body is itself Content, so nested
directives form a small recursive tree that lives only for the duration
of one line's render.

Example:
    "{% if name = Bob %} <p> hi {{name}} </p> {% endif %}" classifies to:

    Directive(tag=IfTag(conditional=Conditional(
        condition=Condition(left="name", op=Equal(), right="Bob"),
        body=Variable(expression=Expression(
            source="<p> hi {{name}} </p>",
            placeholders=["{{name}}"],
        )),
    )))
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


# Context: variable name -> ordered bound values (len 1 = scalar)
Context = Dict[str, List[str]]


@dataclass
class Equal:
    """Compare the bound values of the left operand with the right tokens"""


@dataclass
class In:
    """Iterate over the bound values of the right operand"""


@dataclass
class Unsupported:
    """
    Operator found in a condition that has no render semantics

    The message is emitted verbatim into the output stream in place of the
    directive.
    """
    message: str


Operator = Union[Equal, In, Unsupported]


@dataclass
class Condition:
    left: str
    op: Operator
    right: str


@dataclass
class Expression:
    """
    Text with interpolation placeholders

    Attributes:
        source: Original text (e.g. "Hi {{name}} ,welcome")
        placeholders: Placeholder tokens in order of appearance, duplicates
                      kept (e.g. ["{{name}}"])
        rendered: Output buffer, empty until the expression is rendered
    """
    source: str
    placeholders: List[str] = field(default_factory=list)
    rendered: str = ""


@dataclass
class Literal:
    text: str


@dataclass
class Variable:
    expression: Expression


@dataclass
class Unrecognized:
    """Line with tag/variable markers that match no known shape"""


@dataclass
class Conditional:
    """
    A parsed directive: its condition and the body it guards or repeats

    Attributes:
        condition: Parsed comparison from the directive header
        body: Classified directive body (may itself be a Directive)
    """
    condition: Condition
    body: "Content"


@dataclass
class ForTag:
    conditional: Conditional


@dataclass
class IfTag:
    conditional: Conditional


Tag = Union[ForTag, IfTag]


@dataclass
class Directive:
    tag: Tag


Content = Union[Literal, Variable, Directive, Unrecognized]


@dataclass
class RenderedLine:
    """
    Result of rendering one line of a template

    Exactly one of output/error is set: output holds the rendered text,
    error the message of the FormatError raised for that line.

    Attributes:
        line_number: 1-based position of the line in its source
        source: Raw input line (without trailing newline)
        output: Rendered text, None if the line failed to parse
        error: Format error message, None on success
    """
    line_number: int
    source: str
    output: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
