"""
Context loader for template rendering

A context maps variable names to ordered lists of string values. It can be
read from a YAML mapping file and/or built from "name=v1,v2" assignments
given on the command line:

    # context.yaml
    name: Bob
    city: Boston
    names:
      - Bob
      - Lisa

Scalars become one-element lists; lists keep their order.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from ..models.content import Context


class ContextError(Exception):
    """Raised when a context source cannot be read or has the wrong shape"""
    pass


# Used by the CLI when no context source is given
DEFAULT_CONTEXT: Dict[str, List[str]] = {
    "name": ["Bob"],
    "city": ["Boston"],
}


def values_normalize(name: str, value: Any) -> List[str]:
    """Turn a YAML value into the list-of-strings form of a binding"""
    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, (dict, list, tuple)):
                raise ContextError(f"Variable '{name}' must be a scalar or a list of scalars")
        return [str(item) for item in value]
    if isinstance(value, dict):
        raise ContextError(f"Variable '{name}' must be a scalar or a list of scalars")
    return [str(value)]


def context_fromMapping(data: Any) -> Context:
    """
    Build a context from a parsed YAML document

    Args:
        data: Parsed YAML (expected to be a mapping or None)

    Returns:
        Context with every value normalized to a list of strings

    Raises:
        ContextError: Document is not a mapping, or a value is nested
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ContextError("Context file must contain a mapping of name -> value(s)")

    return {str(name): values_normalize(str(name), value) for name, value in data.items()}


def context_load(path: Union[str, Path]) -> Context:
    """
    Load a context from a YAML file

    Raises:
        ContextError: File missing, unreadable, or not valid YAML
    """
    context_path = Path(path)
    if not context_path.exists():
        raise ContextError(f"Context file not found: {context_path}")

    try:
        with open(context_path, 'r', encoding='utf-8') as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ContextError(f"Failed to parse {context_path.name}: {e}")
    except OSError as e:
        raise ContextError(f"Failed to load {context_path.name}: {e}")

    return context_fromMapping(data)


def context_fromAssignments(assignments: Iterable[str]) -> Context:
    """
    Build a context from "name=v1,v2" assignments

    Example:
        >>> context_fromAssignments(["name=Bob", "names=Bob,Lisa"])
        {'name': ['Bob'], 'names': ['Bob', 'Lisa']}
    """
    context: Context = {}
    for assignment in assignments:
        name, sep, values = assignment.partition('=')
        name = name.strip()
        if not sep or not name:
            raise ContextError(f"Invalid assignment '{assignment}', expected name=value[,value...]")
        context[name] = [value.strip() for value in values.split(',')]
    return context


def context_merge(*contexts: Context) -> Context:
    """Merge contexts left to right; later bindings replace earlier ones"""
    merged: Context = {}
    for context in contexts:
        merged.update({name: list(values) for name, values in context.items()})
    return merged
