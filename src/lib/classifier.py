"""
Line classifier

Decides which of the four content shapes a raw template line is. Detection
is plain substring containment, not tokenization: a line mentioning "info"
counts as containing "if".
"""

from ..models.content import Content, Directive, ForTag, IfTag, Literal, Unrecognized, Variable
from .expression import expression_build
from .log import LOG
from .parser import conditional_parse


def markers_balanced(line: str, opening: str, closing: str) -> bool:
    """True if line has at least one opening marker and as many closing ones"""
    count = line.count(opening)
    return count == line.count(closing) and count != 0


def content_classify(line: str) -> Content:
    """
    Classify one template line

    Args:
        line: Raw template line (trailing newline irrelevant)

    Returns:
        Directive for balanced {% %} lines naming for/if, Variable for
        balanced {{ }} lines, Literal for lines with neither, and
        Unrecognized for anything else

    Raises:
        FormatError: The line looks like a directive but does not parse

    Example:
        >>> content_classify("<h1>Hello world</h1>")
        Literal(text='<h1>Hello world</h1>')
    """
    is_tag = markers_balanced(line, "{%", "%}")
    is_for = ("for" in line and "in" in line) or "endfor" in line
    is_if = "if" in line or "endif" in line
    is_variable = markers_balanced(line, "{{", "}}")

    if is_tag and is_for:
        LOG(f"for-tag: {line}", level=3)
        return Directive(tag=ForTag(conditional=conditional_parse(line)))
    if is_tag and is_if:
        LOG(f"if-tag: {line}", level=3)
        return Directive(tag=IfTag(conditional=conditional_parse(line)))
    if is_variable:
        LOG(f"variable: {line}", level=3)
        return Variable(expression=expression_build(line))
    if not is_tag and not is_variable:
        return Literal(text=line)

    LOG(f"Unrecognized line: {line}", level=2)
    return Unrecognized()
