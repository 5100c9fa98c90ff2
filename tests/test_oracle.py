"""中缀 -> 后缀 -> 再解析后缀 -> 求值，与直接计算的参考值比较"""
from hypothesis import assume, given, settings, strategies as st

from core import evaluate_postfix, infix_to_postfix, parse_postfix
from utils.formatting import render_postfix


def _trunc_div(a, b):
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _binary(parts):
    (left, lv), op, (right, rv) = parts
    text = f"({left}) {op} ({right})"
    if lv is None or rv is None:
        return text, None
    if op == "+":
        return text, lv + rv
    if op == "-":
        return text, lv - rv
    if op == "*":
        return text, lv * rv
    if rv == 0:
        return text, None
    return text, _trunc_div(lv, rv)


def _negate(part):
    text, value = part
    return f"-({text})", None if value is None else -value


literals = st.integers(min_value=0, max_value=99).map(lambda n: (str(n), n))

expressions = st.recursive(
    literals,
    lambda children: st.one_of(
        st.tuples(children, st.sampled_from("+-*/"), children).map(_binary),
        children.map(_negate),
    ),
    max_leaves=8,
)


@settings(max_examples=200)
@given(expressions)
def test_postfix_round_trip_matches_reference(expr):
    text, expected = expr
    assume(expected is not None)

    postfix = infix_to_postfix(text)
    assert evaluate_postfix(postfix) == expected

    reparsed = parse_postfix(render_postfix(postfix))
    assert evaluate_postfix(reparsed) == expected
