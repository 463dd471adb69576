"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field

from .content import RenderedLine


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the render pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as rendering progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, contextFile,
                   var, outputFile, strict
        - env_check: templateFile, contextSourceFile, htmlOutputFile, envOK
        - context_build: context
        - template_render: renderedLines
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the template file
        outputdir: Directory for the rendered output
        verbosity: Logging verbosity level (1-3)
        inputFile: Template filename (relative to inputdir)
        contextFile: Optional YAML context filename (relative to inputdir)
        var: "name=v1,v2" assignments from the command line
        outputFile: Rendered output filename (relative to outputdir)
        strict: Halt on the first malformed directive
        envOK: Environment validation passed
        templateFile: Resolved path to the template file
        contextSourceFile: Resolved path to the context file, if any
        htmlOutputFile: Resolved path of the rendered output
        context: Variable bindings used for rendering
        renderedLines: Per-line render results
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    contextFile: Optional[str] = field(default=None)
    var: List[str] = field(default_factory=list)
    outputFile: Optional[str] = field(default=None)
    strict: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    templateFile: Path = field(default=Path("/"))
    contextSourceFile: Optional[Path] = field(default=None)
    htmlOutputFile: Path = field(default=Path("/"))
    context: Optional[Dict[str, List[str]]] = field(default=None)
    renderedLines: Optional[List[RenderedLine]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, contextFile, etc.)
            inputdir: Directory containing the template
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {
            k: v for k, v in options_dict.items() if k in valid_fields and v is not None
        }

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            context_build,
            template_render,
            results_report
        )

    This is equivalent to:
        results_report(template_render(context_build(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
