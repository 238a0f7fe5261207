"""Quantity arithmetic for grocery consolidation.

Quantities are free text ("1 1/2", "½", "2-3"). Parsing is heuristic and
never raises: anything it cannot read counts as 0, and combining falls back
to plain concatenation ("2 cups + 100 g").
"""
import re

UNICODE_FRACTIONS = {
    '½': 0.5,
    '¼': 0.25,
    '¾': 0.75,
    '⅓': 0.333,
    '⅔': 0.667,
    '⅛': 0.125,
}

_LEADING_FLOAT_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_FRACTION_RE = re.compile(r'^(\d+)\s*/\s*(\d+)$')
_MIXED_RE = re.compile(r'^(\d+)\s+(\d+)\s*/\s*(\d+)$')
_RANGE_RE = re.compile(r'^([\d.]+)\s*[–\-]\s*([\d.]+)$')


def _leading_float(text: str) -> float:
    """Numeric prefix of text ("2 large" -> 2.0); 0.0 when there is none."""
    match = _LEADING_FLOAT_RE.match(text.strip())
    if not match:
        return 0.0
    try:
        return float(match.group(0))
    except ValueError:
        return 0.0


def _divide(numerator: str, denominator: str) -> float:
    d = int(denominator)
    return int(numerator) / d if d else 0.0


def parse_quantity(quantity: str) -> float:
    cleaned = (quantity or '').strip()
    if not cleaned:
        return 0.0

    for char, value in UNICODE_FRACTIONS.items():
        if char in cleaned:
            prefix = cleaned.replace(char, '', 1).strip()
            return (_leading_float(prefix) if prefix else 0.0) + value

    m = _FRACTION_RE.match(cleaned)
    if m:
        return _divide(m.group(1), m.group(2))

    m = _MIXED_RE.match(cleaned)
    if m:
        return int(m.group(1)) + _divide(m.group(2), m.group(3))

    # Ranges like "2-3": buy for the upper bound
    m = _RANGE_RE.match(cleaned)
    if m:
        return _leading_float(m.group(2))

    return _leading_float(cleaned)


def _format_amount(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def combine_quantities(q1: str, q2: str, u1: str = '', u2: str = '') -> str:
    """Merge two quantities of the same ingredient.

    Same unit (or both unit-less) and both parseable: numeric sum.
    Otherwise the two are joined as text, e.g. "1 cup + 200 g".
    """
    q1, q2, u1, u2 = q1 or '', q2 or '', u1 or '', u2 or ''
    if not q1:
        return q2
    if not q2:
        return q1

    if u1.lower() == u2.lower():
        n1 = parse_quantity(q1)
        n2 = parse_quantity(q2)
        if n1 > 0 and n2 > 0:
            return _format_amount(n1 + n2)

    part1 = f"{q1} {u1}" if u1 else q1
    part2 = f"{q2} {u2}" if u2 else q2
    return f"{part1} + {part2}"


__all__ = ['parse_quantity', 'combine_quantities', 'UNICODE_FRACTIONS']
