from .errors import BadDigit, DivisionByZero, InputParseError, CountMismatch
from .rational import Rational, gcd, lcm
from .base_decoder import decode
from .polynomial import Polynomial, poly_add, poly_scale, poly_mul_linear, poly_eval
from .newton import Point, NewtonInterpolator, interpolate
from .integer_form import IntegerForm, to_integer_form
from .converter import ShareEntry, ShareDocument, read_document, decode_points, choose_points
