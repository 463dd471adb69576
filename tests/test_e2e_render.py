"""
End-to-end render tests

Tests the full pipeline: template file → env_check → context_build →
template_render → results_report → HTML output file.
"""

import pytest

from templine.__main__ import context_build, env_check, results_report, template_render
from templine.models import ProgramState, pipeline


TEMPLATE = """<ul>
{% for customer in names %} <li> {{customer}} </li> {% endfor %}
</ul>
<p> Hi {{name}} ,welcome </p>
{% if city = Boston %} <p> Boston! </p> {% endif %}
"""


def run(state: ProgramState) -> ProgramState:
    return pipeline(state, env_check, context_build, template_render, results_report)


@pytest.fixture
def workdir(tmp_path):
    (tmp_path / "page.tpl").write_text(TEMPLATE)
    return tmp_path


class TestRenderPipeline:
    """Complete template renders"""

    def test_var_bindings(self, workdir):
        state = run(ProgramState(
            inputdir=workdir,
            outputdir=workdir / "out",
            inputFile="page.tpl",
            var=["name=Bob", "names=Bob,Lisa", "city=Boston"],
        ))

        html = (workdir / "out" / "index.html").read_text()
        assert html == (
            "<ul>\n"
            "<li> Bob </li>\n<li> Lisa </li>\n\n"
            "</ul>\n"
            "<p> Hi Bob ,welcome </p>\n"
            "<p> Boston! </p>\n"
        )
        assert len(state.renderedLines) == 5
        assert state.envOK is True

    def test_context_file_with_override(self, workdir):
        (workdir / "context.yaml").write_text(
            "name: Alice\ncity: Paris\nnames:\n  - Ann\n  - Joe\n"
        )
        run(ProgramState(
            inputdir=workdir,
            outputdir=workdir / "out",
            inputFile="page.tpl",
            contextFile="context.yaml",
            var=["name=Bob"],
            outputFile="page.html",
        ))

        html = (workdir / "out" / "page.html").read_text()
        assert "<li> Ann </li>\n<li> Joe </li>\n" in html
        assert "<p> Hi Bob ,welcome </p>" in html
        assert "Boston!" not in html

    def test_default_context(self, workdir):
        """Without bindings the built-in name/city context is used"""
        state = run(ProgramState(inputdir=workdir, outputdir=workdir / "out", inputFile="page.tpl"))

        assert state.context == {"name": ["Bob"], "city": ["Boston"]}
        html = (workdir / "out" / "index.html").read_text()
        assert "<p> Hi Bob ,welcome </p>" in html
        assert "<p> Boston! </p>" in html

    def test_malformed_line_skipped(self, workdir):
        (workdir / "page.tpl").write_text(
            "<p> one </p>\n{% if name = Bob %} <p> broken </p>\n<p> two </p>\n"
        )
        state = run(ProgramState(inputdir=workdir, outputdir=workdir / "out", inputFile="page.tpl"))

        assert (workdir / "out" / "index.html").read_text() == "<p> one </p>\n<p> two </p>\n"
        assert [line.ok for line in state.renderedLines] == [True, False, True]


class TestRenderFailures:
    """Stages that stop the pipeline"""

    def test_missing_template(self, tmp_path):
        with pytest.raises(SystemExit):
            run(ProgramState(inputdir=tmp_path, outputdir=tmp_path / "out", inputFile="nope.tpl"))

    def test_missing_context_file(self, workdir):
        with pytest.raises(SystemExit):
            run(ProgramState(
                inputdir=workdir,
                outputdir=workdir / "out",
                inputFile="page.tpl",
                contextFile="nope.yaml",
            ))

    def test_strict_mode_halts(self, workdir):
        (workdir / "page.tpl").write_text("{% if name = Bob %} <p> broken </p>\n")
        with pytest.raises(SystemExit):
            run(ProgramState(
                inputdir=workdir,
                outputdir=workdir / "out",
                inputFile="page.tpl",
                strict=True,
            ))

    def test_unbound_variable_halts(self, workdir):
        with pytest.raises(SystemExit):
            run(ProgramState(
                inputdir=workdir,
                outputdir=workdir / "out",
                inputFile="page.tpl",
                var=["names=Bob"],
            ))
