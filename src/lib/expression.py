"""
Interpolation placeholder extraction

A placeholder is a whitespace-delimited token containing both "{{" and "}}".
Placeholders glued to neighbouring text without whitespace are still picked
up as part of their token (e.g. "({{name}})"), but "{{ name }}" with inner
spaces is not a placeholder at all.
"""

from typing import List

from ..models.content import Expression


OPEN_MARKER = "{{"
CLOSE_MARKER = "}}"


def placeholders_extract(text: str) -> List[str]:
    """
    Find interpolation placeholder tokens in text

    Args:
        text: Literal/variable text from a template line

    Returns:
        Placeholder tokens in order of appearance, duplicates preserved

    Example:
        >>> placeholders_extract("Hi {{name}} and {{name}} from {{city}}")
        ['{{name}}', '{{name}}', '{{city}}']
    """
    return [
        word for word in text.split()
        if OPEN_MARKER in word and CLOSE_MARKER in word
    ]


def expression_build(text: str) -> Expression:
    """Wrap text and its placeholders into an unrendered Expression"""
    return Expression(source=text, placeholders=placeholders_extract(text))


def placeholder_name(token: str) -> str:
    """
    Strip the interpolation markers from a placeholder token

    Example:
        >>> placeholder_name("{{name}},")
        'name'
    """
    start = token.find(OPEN_MARKER) + len(OPEN_MARKER)
    end = token.find(CLOSE_MARKER, start)
    return token[start:end]
