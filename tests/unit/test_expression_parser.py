import pytest
from pydantic import ValidationError
from t2u.MODELS.expression import Expression, Operator
from t2u.PARSERS.expression_parser import ExpressionParser

def test_parse_from_string():
    template = "http://example.com{/path}{?q,lang}#{x%10}"
    parser = ExpressionParser()
    expressions = parser.parse_from_string(template)

    assert [e.operator for e in expressions] == [Operator.PATH, Operator.QUERY, Operator.SIMPLE]
    assert expressions[0].variables == ['path']
    assert expressions[1].variables == ['q', 'lang']
    assert expressions[2].variables == ['x%10']

    # Offsets point back into the template
    for e in expressions:
        assert template[e.start:e.end] == e.raw

@pytest.mark.parametrize("op_char, operator", [
    ('', Operator.SIMPLE),
    ('+', Operator.RESERVED),
    ('#', Operator.FRAGMENT),
    ('.', Operator.LABEL),
    ('/', Operator.PATH),
    (';', Operator.PATH_PARAM),
    ('?', Operator.QUERY),
    ('&', Operator.QUERY_CONTINUATION),
])
def test_operators(op_char, operator):
    expressions = ExpressionParser().parse_from_string("{%sv}" % op_char)
    assert len(expressions) == 1
    assert expressions[0].operator is operator

def test_malformed_regions_are_skipped():
    parser = ExpressionParser()
    assert parser.parse_from_string("{}") == []
    assert parser.parse_from_string("{a b}") == []
    assert parser.parse_from_string("{x:3}{y*}{=z}") == []
    assert parser.parse_from_string("no expressions here") == []

def test_finditer_is_lazy():
    iterator = ExpressionParser().finditer("{a}{b}")
    first = next(iterator)
    assert first.variables == ['a']
    assert next(iterator).variables == ['b']
    with pytest.raises(StopIteration):
        next(iterator)

def test_empty_names_between_commas_are_kept():
    expressions = ExpressionParser().parse_from_string("{a,,b}")
    assert expressions[0].variables == ['a', '', 'b']

def test_expression_is_immutable():
    expression = ExpressionParser().parse_from_string("{a}")[0]
    with pytest.raises(ValidationError):
        expression.raw = "{b}"

def test_expression_rejects_unknown_operator():
    with pytest.raises(ValidationError):
        Expression(operator="!", variables=['a'], raw="{!a}", start=0, end=4)
