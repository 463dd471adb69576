"""
Parser for {% if %} / {% for %} directive lines

Turns a single directive line into a Conditional: the parsed header condition
plus the classified body between the header and the trailing closing tag.

Supported forms:
    {% if LEFT OP RIGHT %} BODY {% endif %}
    {% for VAR in COLLECTION %} BODY {% endfor %}

The body is handed back to the classifier, so a body that is itself a
directive produces a nested Conditional:

    >>> c = conditional_parse(
    ...     "{% if name = Bob %} {% for c in names %} <li> {{c}} </li> {% endfor %} {% endif %}"
    ... )
    >>> type(c.body.tag).__name__
    'ForTag'
"""

from typing import Dict

from ..models.content import Condition, Conditional, Equal, In, Operator, Unsupported
from .log import LOG


class FormatError(Exception):
    """Raised when a directive line or its condition is malformed"""
    pass


# Scanned in order; the first one contained in the condition wins
OPERATORS = [">", ">=", "=", "<=", "<", "in"]

CLOSING_TAGS = ["{% endif %}", "{% endfor %}"]
OPENING_TAGS = ["{% if ", "{% for "]
HEADER_CLOSE = " %}"


def operator_parse(token: str) -> Operator:
    """
    Map an operator token to its Operator variant

    Args:
        token: Operator as written in the condition (e.g. "=", "in")

    Returns:
        Equal, In, or Unsupported carrying the inline diagnostic message
    """
    from ..config import appsettings

    operators: Dict[str, Operator] = {
        "=": Equal(),
        "in": In(),
    }
    return operators.get(token, Unsupported(appsettings.unsupported_message))


def condition_parse(text: str) -> Condition:
    """
    Parse the inline condition of a directive header

    Args:
        text: Condition text between the opening keyword and " %}"
              (e.g. " amount = 2000 ")

    Returns:
        Condition with trimmed operands

    Raises:
        FormatError: No known operator in the text, or splitting on the
                     first one found does not give exactly two operands

    Example:
        >>> condition_parse(" amount = 2000 ")
        Condition(left='amount', op=Equal(), right='2000')
    """
    text = text.strip()

    for operator in OPERATORS:
        if operator not in text:
            continue

        operands = text.split(operator)
        if len(operands) != 2:
            break

        return Condition(
            left=operands[0].strip(),
            op=operator_parse(operator),
            right=operands[1].strip(),
        )

    raise FormatError(f"Invalid format: '{text}'")


def conditional_parse(line: str) -> Conditional:
    """
    Parse a full directive line into its condition and body

    Args:
        line: One template line ending in "{% endif %}" or "{% endfor %}"

    Returns:
        Conditional with parsed condition and recursively classified body

    Raises:
        FormatError: Missing closing tag, missing opening keyword, header
                     without " %}", empty condition, or bad condition
    """
    from .classifier import content_classify

    closing = next((tag for tag in CLOSING_TAGS if line.endswith(tag)), None)
    if closing is None:
        raise FormatError(f"Invalid input format: missing {{% endif %}}/{{% endfor %}} in '{line}'")

    start_condition = -1
    for opening in OPENING_TAGS:
        position = line.find(opening)
        if position != -1:
            start_condition = position + len(opening)
            break
    if start_condition == -1:
        raise FormatError(f"Invalid input format: no {{% if %}}/{{% for %}} header in '{line}'")

    end_condition = line.find(HEADER_CLOSE)
    if end_condition == -1 or start_condition >= end_condition:
        raise FormatError(f"Invalid input format: empty condition in '{line}'")

    body_end = len(line) - len(closing)
    if end_condition + len(HEADER_CLOSE) > body_end:
        raise FormatError(f"Invalid input format: header not closed before {closing} in '{line}'")

    condition = condition_parse(line[start_condition:end_condition])
    body = line[end_condition + len(HEADER_CLOSE):body_end].strip()
    LOG(f"Directive condition {condition}, body '{body}'", level=3)

    return Conditional(condition=condition, body=content_classify(body))
