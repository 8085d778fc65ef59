# pip install lark
import json
from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError
from .errors import InputParseError

"""
share documents are JSON, e.g

{
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    ...
}

the grammar follows the JSON grammar (RFC 8259), numbers included: no leading +,
no leading zeros, no bare "." on either side. parsing it here gives
  - syntax errors that carry a line and column
  - one place where numbers become python values (ints stay ints, the rest is
    left for the schema check to reject)
"""

parser = Lark(r"""
    ?value: object
          | array
          | string
          | NUMBER -> number
          | "true" -> true
          | "false" -> false
          | "null" -> null

    array: "[" (value ("," value)*)? "]"
    object: "{" (pair ("," pair)*)? "}"
    pair: string ":" value

    string: ESCAPED_STRING

    NUMBER: /-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?/

    %import common.ESCAPED_STRING
    %import common.WS
    %ignore WS
    """, start='value', parser='lalr')


class DocumentTransformer(Transformer):
    def string(self, children):
        (token,) = children
        # ESCAPED_STRING is a json string literal, json handles the escapes
        return json.loads(token, strict=False)

    def number(self, children):
        (token,) = children
        if any(c in token for c in ".eE"):
            # fractional or exponent form, kept so the schema check can reject it by name
            return float(token)
        return int(token)

    def array(self, children):
        return list(children)

    def pair(self, children):
        key, value = children
        return (key, value)

    def object(self, children):
        # duplicate names: last one wins, same as JSON.parse / json.loads
        return dict(children)

    def true(self, _):
        return True

    def false(self, _):
        return False

    def null(self, _):
        return None


def parse_document(text: str):
    """
    Parse document text into plain python values (dict, list, str, int, float, bool, None).

    Raises InputParseError if the text is not well-formed.
    """
    try:
        tree = parser.parse(text)
    except UnexpectedInput as e:
        raise InputParseError(f"Input is not a well-formed document (line {e.line}, column {e.column})") from e

    try:
        return DocumentTransformer().transform(tree)
    except VisitError as e:
        # e.g an invalid escape sequence like "\q" inside a string
        raise InputParseError(f"Input is not a well-formed document ({e.orig_exc})") from e
