"""
HTML generator for classified template content

Renders Content against a read-only Context. Rendering recurses into
directive bodies exactly as deep as the parser nested them.

Lookup policy:
    - Direct interpolation ({{name}} outside a directive) raises
      ContextLookupError when the name is unbound.
    - A directive whose condition references an unbound name renders as
      an empty string.
"""

from typing import Iterable, List

from ..models.content import (
    Conditional,
    Content,
    Context,
    Directive,
    Equal,
    Expression,
    In,
    Literal,
    RenderedLine,
    Unrecognized,
    Unsupported,
    Variable,
)
from .classifier import content_classify
from .expression import placeholder_name
from .log import LOG
from .parser import FormatError


class ContextLookupError(LookupError):
    """Raised when an interpolated variable is not bound in the context"""
    pass


def variable_render(expression: Expression, context: Context) -> str:
    """
    Substitute every placeholder of an expression from the context

    Each placeholder token is replaced, at every occurrence, by the first
    value bound to its name. The result is also stored in
    expression.rendered.

    Args:
        expression: Expression built from a Variable line
        context: Variable bindings

    Returns:
        Rendered text

    Raises:
        ContextLookupError: A placeholder names an unbound variable

    Example:
        >>> variable_render(expression_build("Hi {{name}} ,welcome"), {"name": ["Bob"]})
        'Hi Bob ,welcome'
    """
    expression.rendered = expression.source

    for placeholder in expression.placeholders:
        name = placeholder_name(placeholder)
        if name not in context:
            raise ContextLookupError(f"Variable '{name}' is not defined in context")

        expression.rendered = expression.rendered.replace(placeholder, context[name][0])

    return expression.rendered


def content_render(content: Content, context: Context) -> str:
    """Render any content variant; Unrecognized renders as nothing"""
    if isinstance(content, Literal):
        return content.text
    if isinstance(content, Variable):
        return variable_render(content.expression, context)
    if isinstance(content, Directive):
        return tag_render(content.tag.conditional, context)
    return ""


def equal_render(conditional: Conditional, context: Context) -> str:
    """Render the body if the left operand's values match the right tokens"""
    condition = conditional.condition
    if condition.left not in context:
        LOG(f"'{condition.left}' not in context, skipping if-body", level=2)
        return ""

    if condition.right.split() != context[condition.left]:
        return ""

    return content_render(conditional.body, context)


def in_render(conditional: Conditional, context: Context) -> str:
    """
    Repeat the body once per value bound to the right operand

    Literal bodies repeat unchanged. Variable bodies get their first
    placeholder replaced by the current value; the loop variable named in
    the header is not consulted. Other body kinds produce only the newline.
    """
    condition = conditional.condition
    if condition.right not in context:
        LOG(f"'{condition.right}' not in context, skipping for-body", level=2)
        return ""

    body = conditional.body
    html = []
    for element in context[condition.right]:
        if isinstance(body, Literal):
            html.append(body.text)
        elif isinstance(body, Variable):
            expression = body.expression
            expression.rendered = expression.source
            if expression.placeholders:
                expression.rendered = expression.rendered.replace(expression.placeholders[0], element)
            html.append(expression.rendered)
        html.append("\n")

    return "".join(html)


def tag_render(conditional: Conditional, context: Context) -> str:
    """
    Render a parsed directive by dispatching on its operator

    Args:
        conditional: Parsed directive
        context: Variable bindings

    Returns:
        Rendered body for Equal/In, or the diagnostic message verbatim for
        an Unsupported operator
    """
    op = conditional.condition.op

    if isinstance(op, Equal):
        return equal_render(conditional, context)
    if isinstance(op, In):
        return in_render(conditional, context)
    if isinstance(op, Unsupported):
        LOG(f"Unsupported operator in condition: {conditional.condition}", level=2)
        return op.message

    raise TypeError(f"Unknown operator {op!r}")


def line_render(line: str, context: Context) -> str:
    """
    Classify and render one template line

    Args:
        line: Raw template line; a trailing newline is ignored
        context: Variable bindings

    Returns:
        Rendered text; the configured unrecognized marker for lines that
        match no known shape

    Raises:
        FormatError: Malformed directive
        ContextLookupError: Unbound variable in direct interpolation
    """
    from ..config import appsettings

    content = content_classify(line.rstrip("\r\n"))
    if isinstance(content, Unrecognized):
        return appsettings.unrecognized_marker
    return content_render(content, context)


def lines_render(lines: Iterable[str], context: Context, strict: bool = False) -> List[RenderedLine]:
    """
    Render a sequence of lines independently of each other

    A malformed directive only affects its own line: the FormatError is
    recorded on that line's result and rendering continues, unless strict
    is set, in which case it is re-raised.

    Args:
        lines: Line source, one template line per item
        context: Variable bindings, never modified
        strict: Re-raise the first FormatError instead of recording it

    Returns:
        One RenderedLine per input line, in input order

    Raises:
        FormatError: Only when strict is set
        ContextLookupError: Unbound variable in direct interpolation
    """
    results = []
    for line_number, line in enumerate(lines, start=1):
        source = line.rstrip("\r\n")
        try:
            output = line_render(source, context)
        except FormatError as e:
            if strict:
                raise
            LOG(f"Line {line_number}: {e}", level=1)
            results.append(RenderedLine(line_number=line_number, source=source, error=str(e)))
            continue
        results.append(RenderedLine(line_number=line_number, source=source, output=output))

    LOG(f"Rendered {len(results)} lines", level=2)
    return results
