import argparse
import sys
from .converter import read_document, choose_points, ShareDocument
from .errors import BadDigit, DivisionByZero, InputParseError
from .integer_form import IntegerForm, to_integer_form
from .newton import interpolate
from .polynomial import Polynomial


"""
reconstructs the polynomial behind a share document

    polyrecon testcase.json
    python -m polyrecon < testcase.json

the rest of polyrecon never prints, everything user-facing happens here
"""


def read_input(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def reconstruct(document: ShareDocument) -> tuple[Polynomial, IntegerForm]:
    # any k of the shares would do, the first k (by x) are used
    points = choose_points(document)
    coeffs = interpolate(points)
    return coeffs, to_integer_form(coeffs)


def format_report(coeffs: Polynomial, integer_form: IntegerForm) -> str:
    lines = [
        f"Degree m = {len(coeffs) - 1}",
        "",
        "Coefficients (a0 + a1 x + ... + am x^m):",
        "",
    ]
    lines += [f"a{i} = {c}" for i, c in enumerate(coeffs)]
    lines += [
        "",
        f"Equivalent integer-coefficient polynomial Q(x) = D * P(x), with D = {integer_form.scale}:",
        # ascending powers: c0 + c1 x + ...
        "Q(x) = " + " + ".join(f"{c}*x^{i}" for i, c in enumerate(integer_form.coefficients)),
    ]
    return "\n".join(lines)


def _run(path: str | None) -> int:
    try:
        text = read_input(path)
    except OSError as e:
        print(f"Error: could not read '{path}': {e.strerror or e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        source = "standard input" if path is None else f"'{path}'"
        print(f"Error: {source} is not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
        return 1

    try:
        document = read_document(text)

        mismatch = document.count_mismatch()
        if mismatch is not None:
            print(mismatch, file=sys.stderr)

        coeffs, integer_form = reconstruct(document)
    except (BadDigit, DivisionByZero, InputParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_report(coeffs, integer_form))
    return 0


def main(argv: list[str] | None = None) -> int:
    arg_parser = argparse.ArgumentParser(
        prog="polyrecon",
        description="Reconstruct an exact polynomial from base-encoded shares.")
    arg_parser.add_argument("path", nargs="?", default=None,
                            help="share document to read (default: standard input)")
    args = arg_parser.parse_args(argv)

    # keys, shares and coefficients can run past python's default 4300 digit
    # limit on int <-> str conversion
    old_limit = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        return _run(args.path)
    finally:
        sys.set_int_max_str_digits(old_limit)


def run():
    sys.exit(main())
