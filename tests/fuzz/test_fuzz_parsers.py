import random
import string
from t2u import interpolate
from t2u.PARSERS.expression_parser import ExpressionParser
from t2u.UTILS.percent_encoding import encode_reserved, encode_unreserved
from t2u.UTILS.string_interpolation import PositionalInterpolator

TEMPLATE_CHARS = string.printable + "{}{}+#./;?&%,é€\U0001F600"

def random_string(length, alphabet=TEMPLATE_CHARS):
    return ''.join(random.choice(alphabet) for _ in range(length))

def test_fuzz_interpolate_never_fails():
    names = ['a', 'b', 'x', 'y', '0', 'x%10']
    for _ in range(200):
        template = random_string(random.randint(0, 200))
        variables = {name: random_string(random.randint(0, 10)) for name in names}
        result = interpolate(template, variables)
        assert isinstance(result, str)

def test_fuzz_literal_pass_through():
    alphabet = string.printable.replace('{', '') + "é€"
    for _ in range(200):
        template = random_string(random.randint(0, 200), alphabet)
        assert interpolate(template, {'a': 'b'}) == template

def test_fuzz_expression_offsets():
    parser = ExpressionParser()
    for _ in range(100):
        template = random_string(random.randint(0, 200))
        for expression in parser.finditer(template):
            assert template[expression.start:expression.end] == expression.raw

def test_fuzz_encoded_output_is_ascii():
    for _ in range(100):
        value = random_string(random.randint(0, 50))
        assert encode_unreserved(value).isascii()
        assert encode_reserved(value).isascii()

def test_fuzz_positional_interpolator():
    for _ in range(100):
        template = random_string(random.randint(0, 200))
        PositionalInterpolator.interpolate(template, ['x', 'y'])

def test_edge_cases():
    interpolate("", {})
    interpolate("{" * 1000, {})
    interpolate("{a}" * 1000, {'a': 'b'})
    interpolate("{" + "a," * 1000 + "a}", {})
