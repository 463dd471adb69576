#!/usr/bin/env python3
"""
templine - line-oriented HTML template engine

Renders a template file one line at a time against a variable context and
writes the resulting HTML.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Template language (one construct per line):
    - Plain text/HTML lines pass through unchanged
    - {{name}} placeholders are replaced by the first value bound to name
    - {% if name = Bob %} BODY {% endif %} renders BODY when name is bound
      to exactly the listed values
    - {% for item in names %} BODY {% endfor %} repeats BODY once per value
      bound to names

Usage:
    templine inputdir/ outputdir/ --inputFile page.tpl

Examples:
    # Render with a YAML context
    templine . output/ --inputFile page.tpl --contextFile context.yaml

    # Bind variables on the command line
    templine . output/ --inputFile page.tpl --var name=Bob --var names=Bob,Lisa

    # Stop at the first malformed directive
    templine . output/ --inputFile page.tpl --strict -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import lines_render, __version__, LOG, state_connectToLogger
from .lib.context import (
    DEFAULT_CONTEXT,
    ContextError,
    context_fromAssignments,
    context_load,
    context_merge,
)
from .lib.generator import ContextLookupError
from .lib.parser import FormatError
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  _                       _ _
 | |_ ___ _ __ ___  _ __ | (_)_ __   ___
 | __/ _ \ '_ ` _ \| '_ \| | | '_ \ / _ \
 | ||  __/ | | | | | |_) | | | | | |  __/
  \__\___|_| |_| |_| .__/|_|_|_| |_|\___|
                   |_|
  Line-oriented HTML template engine
"""

# Define CLI arguments
parser = ArgumentParser(
    description="templine - line-oriented HTML template engine",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Template file (relative to inputdir)"
)

parser.add_argument(
    "--contextFile",
    default=None,
    type=str,
    help="YAML file mapping variable names to values (relative to inputdir)",
)

parser.add_argument(
    "--var",
    action="append",
    default=[],
    help="Variable binding name=value[,value...] (repeatable, overrides --contextFile)",
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Rendered output filename within outputdir (defaults to TEMPLINE_OUTPUT_FILENAME)",
)

parser.add_argument(
    "--strict",
    action="store_true",
    help="Halt on the first malformed directive instead of skipping the line",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Returns:
        ProgramState with added fields:
            - templateFile: Resolved path to the template
            - contextSourceFile: Resolved path to the context file, or None
            - htmlOutputFile: Output file path (parent directory created)
            - envOK: True if environment is valid

    Exits:
        1 if the template or context file is not found
    """
    from .config import appsettings

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    template_file = state.inputdir / state.inputFile
    if not template_file.exists():
        print(f"Error: Template file not found: {template_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    state.templateFile = template_file
    LOG(f"Template file: {template_file}", level=2)

    context_name = state.contextFile or appsettings.context_filename
    if context_name:
        context_file = state.inputdir / context_name
        if not context_file.exists():
            print(f"Error: Context file not found: {context_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.contextSourceFile = context_file
        LOG(f"Context file: {context_file}", level=2)

    state.htmlOutputFile = state.outputdir / (state.outputFile or appsettings.output_filename)
    state.htmlOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.htmlOutputFile}", level=2)

    state.envOK = True
    return state


def context_build(inputstate: ProgramState) -> ProgramState:
    """
    Assemble the render context from the context file and --var bindings.

    Falls back to the built-in default context when neither is given.

    Returns:
        ProgramState with added field:
            - context: Dict[str, List[str]] of variable bindings

    Exits:
        1 if the context file or a binding is invalid
    """
    state = inputstate.copy()

    LOG("Building context...", level=1)

    if state.contextSourceFile is None and not state.var:
        state.context = context_merge(DEFAULT_CONTEXT)
        LOG("No context given, using default bindings", level=2)
        return state

    try:
        from_file = context_load(state.contextSourceFile) if state.contextSourceFile else {}
        from_vars = context_fromAssignments(state.var)
    except ContextError as e:
        print(f"Context error: {e}", file=sys.stderr)
        sys.exit(1)

    state.context = context_merge(from_file, from_vars)
    LOG(f"Context has {len(state.context)} variables", level=2)
    return state


def template_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the template line by line and write the HTML output.

    Lines with malformed directives are skipped (logged) unless strict mode
    is on, in which case rendering halts.

    Returns:
        ProgramState with added field:
            - renderedLines: List[RenderedLine], one per template line

    Exits:
        1 on a malformed directive in strict mode, or an interpolated
        variable missing from the context
    """
    from .config import appsettings

    state = inputstate.copy()

    LOG("Rendering template...", level=1)

    try:
        with open(state.templateFile, 'r', encoding='utf-8') as f:
            state.renderedLines = lines_render(
                f, state.context or {}, strict=state.strict or appsettings.strict_mode
            )
    except FormatError as e:
        print(f"Format error: {e}", file=sys.stderr)
        sys.exit(1)
    except ContextLookupError as e:
        print(f"Render error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error reading template file: {e}", file=sys.stderr)
        sys.exit(1)

    html = "".join(f"{line.output}\n" for line in state.renderedLines if line.ok)
    state.htmlOutputFile.write_text(html, encoding='utf-8')
    LOG(f"Wrote {state.htmlOutputFile}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display render results to the user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderedLines is None
    """
    state: ProgramState = inputstate.copy()
    if state.renderedLines is None:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    skipped = [line for line in state.renderedLines if not line.ok]
    LOG("\n✓ Rendering complete!", level=1)
    LOG(f"  Output: {state.htmlOutputFile}", level=1)
    LOG(f"  Lines:  {len(state.renderedLines) - len(skipped)} rendered, {len(skipped)} skipped", level=1)
    for line in skipped:
        LOG(f"  line {line.line_number}: {line.error}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="templine - line-oriented HTML template engine",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a template file to HTML.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. context_build: Load and merge variable bindings
        3. template_render: Render each template line and write output
        4. results_report: Display results to user

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, context_build, template_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
