"""
Directive parser tests

Tests condition parsing, operator mapping, directive line structure, and
nested directive bodies.
"""

import pytest

from templine.lib.classifier import content_classify
from templine.lib.parser import (
    FormatError,
    condition_parse,
    conditional_parse,
    operator_parse,
)
from templine.models.content import (
    Condition,
    Conditional,
    Directive,
    Equal,
    IfTag,
    In,
    Literal,
    Unrecognized,
    Unsupported,
)


class TestOperatorParse:
    """Operator token mapping"""

    def test_equal(self):
        assert operator_parse("=") == Equal()

    def test_in(self):
        assert operator_parse("in") == In()

    @pytest.mark.parametrize("token", [">", ">=", "<=", "<", "~"])
    def test_unsupported(self, token):
        """Anything else carries the inline diagnostic"""
        assert operator_parse(token) == Unsupported("Unrecognized operator")


class TestConditionParse:
    """Inline condition parsing"""

    def test_equal_trimmed(self):
        """Surrounding and inner whitespace is trimmed from operands"""
        assert condition_parse(" amount = 2000 ") == Condition(
            left="amount", op=Equal(), right="2000"
        )

    def test_in(self):
        assert condition_parse("customer in name") == Condition(
            left="customer", op=In(), right="name"
        )

    def test_multi_token_right(self):
        """Right operand keeps its inner spaces"""
        assert condition_parse("names = Bob Lisa").right == "Bob Lisa"

    def test_greater_than_is_unsupported(self):
        assert condition_parse("amount > 2000") == Condition(
            left="amount", op=Unsupported("Unrecognized operator"), right="2000"
        )

    def test_greater_equal_matches_greater_first(self):
        """'>' precedes '>=' in the scan order"""
        assert condition_parse("amount >= 2000") == Condition(
            left="amount", op=Unsupported("Unrecognized operator"), right="= 2000"
        )

    def test_no_operator(self):
        with pytest.raises(FormatError, match="Invalid format"):
            condition_parse("name Bob")

    def test_operator_repeated(self):
        """Splitting must give exactly two operands"""
        with pytest.raises(FormatError, match="Invalid format"):
            condition_parse("a = b = c")

    def test_in_inside_operand(self):
        """'in' inside an operand word breaks the split"""
        with pytest.raises(FormatError, match="Invalid format"):
            condition_parse("item in things")


class TestConditionalParse:
    """Full directive lines"""

    def test_if_literal_body(self):
        assert conditional_parse(
            "{% if amount = 2000 %} <p> hola </p> {% endif %}"
        ) == Conditional(
            condition=Condition(left="amount", op=Equal(), right="2000"),
            body=Literal("<p> hola </p>"),
        )

    def test_for_literal_body(self):
        conditional = conditional_parse("{% for x in names %} <hr> {% endfor %}")
        assert conditional.condition == Condition(left="x", op=In(), right="names")
        assert conditional.body == Literal("<hr>")

    def test_empty_body(self):
        conditional = conditional_parse("{% if a = b %}{% endif %}")
        assert conditional.body == Literal("")

    def test_unrecognized_body(self):
        conditional = conditional_parse("{% for x in names %} {% block %} {% endfor %}")
        assert conditional.body == Unrecognized()

    def test_missing_closing_tag(self):
        with pytest.raises(FormatError, match="missing"):
            conditional_parse("{% if a = b %} <p> x </p>")

    def test_closing_tag_not_last(self):
        """The closing tag must end the line"""
        with pytest.raises(FormatError, match="missing"):
            conditional_parse("{% if a = b %} <p> x </p> {% endif %} trailing")

    def test_missing_header(self):
        with pytest.raises(FormatError, match="header"):
            conditional_parse("<p> x </p> {% endif %}")

    def test_empty_condition(self):
        """Condition start at or past condition end"""
        with pytest.raises(FormatError, match="empty condition"):
            conditional_parse("{% if  %}{% endif %}")

    @pytest.mark.parametrize("line", [
        "{% if name = Bob%} hi {% endif %}",
        "{% for x in names%} {{x}} {% endfor %}",
    ])
    def test_header_without_space_before_close(self, line):
        """Header '%}' glued to the condition leaves only the closing tag's ' %}'"""
        with pytest.raises(FormatError, match="header not closed"):
            conditional_parse(line)

    @pytest.mark.parametrize("line", [
        "{% if name = Bob%} hi {% endif %}",
        "{% for x in names%} {{x}} {% endfor %}",
    ])
    def test_header_without_space_fails_classification(self, line):
        """The error surfaces through the classifier instead of a blank render"""
        with pytest.raises(FormatError):
            content_classify(line)

    def test_bad_condition(self):
        with pytest.raises(FormatError, match="Invalid format"):
            conditional_parse("{% if name Bob %} <p> x </p> {% endif %}")


class TestNesting:
    """Directive bodies that are directives themselves"""

    def test_if_inside_if(self):
        conditional = conditional_parse(
            "{% if name = Bob %} {% if city = Boston %} <p> Boston Bob </p> {% endif %} {% endif %}"
        )
        assert conditional.condition == Condition(left="name", op=Equal(), right="Bob")
        assert conditional.body == Directive(IfTag(Conditional(
            condition=Condition(left="city", op=Equal(), right="Boston"),
            body=Literal("<p> Boston Bob </p>"),
        )))

    def test_three_levels(self):
        conditional = conditional_parse(
            "{% if a = 1 %} {% if b = 2 %} {% if c = 3 %} deep {% endif %} {% endif %} {% endif %}"
        )
        innermost = conditional.body.tag.conditional.body.tag.conditional
        assert innermost.condition == Condition(left="c", op=Equal(), right="3")
        assert innermost.body == Literal("deep")

    def test_malformed_nested_body(self):
        """A bad inner directive fails the whole line"""
        with pytest.raises(FormatError):
            conditional_parse("{% if a = 1 %} {% if b %} x {% endif %} {% endif %}")
