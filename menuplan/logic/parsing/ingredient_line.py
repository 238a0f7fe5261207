"""Ingredient line parsing.

Turns free-text recipe lines such as "4 oz cream cheese, softened" into
IngredientItem(quantity="4", unit="oz", name="cream cheese"). The cleaned
name is the key used for grocery consolidation and seasonality lookups.
"""
import math
import re
from typing import List, Tuple, Union

from menuplan.domain.Ingredient import IngredientItem, IngredientSection

_FRACTION_CHARS = "½¼¾⅓⅔⅛"
_QUANTITY_RE = re.compile(
    rf"^([\d{_FRACTION_CHARS}/\-–]+(?:\s*[\d{_FRACTION_CHARS}/\-–]*)?)\s+"
)
_UNIT_RE = re.compile(
    r"^(cups?|tbsp|tsp|oz|lbs?|pint|quart|gallon|cloves?|cans?|packages?|packets?|slices?"
    r"|pieces?|stalks?|heads?|bunch(?:es)?|large|medium|small|whole|center-cut)\b\.?\s*",
    re.IGNORECASE,
)
_NUMBER_RANGE_RE = re.compile(r"([\d.]+)\s*[–\-]\s*([\d.]+)")
_NUMBER_RE = re.compile(r"([\d.]+)")
_SUBSECTION_RE = re.compile(r"^###\s+(.+)$", re.MULTILINE)


def _normalize_spaces(text: str) -> str:
    return re.sub(r"\s{2,}", " ", text).strip()


def extract_ingredient_name(raw: str) -> str:
    """Strip preparation notes: anything after the first comma and parenthetical asides."""
    name = re.sub(r",\s.*$", "", raw or "")
    name = re.sub(r"\(.*?\)", "", name)
    return _normalize_spaces(name)


def parse_ingredient_line(raw: str) -> IngredientItem:
    clean_raw = _normalize_spaces(raw or "")

    quantity_match = _QUANTITY_RE.match(clean_raw)
    if not quantity_match:
        return IngredientItem(name=extract_ingredient_name(clean_raw), raw=clean_raw)

    quantity = quantity_match.group(1).strip()
    rest = clean_raw[quantity_match.end():]

    unit_match = _UNIT_RE.match(rest)
    if unit_match:
        return IngredientItem(
            name=extract_ingredient_name(rest[unit_match.end():]),
            quantity=quantity,
            unit=unit_match.group(1),
            raw=clean_raw,
        )
    return IngredientItem(name=extract_ingredient_name(rest), quantity=quantity, raw=clean_raw)


def parse_ingredient_items(text: str) -> List[IngredientItem]:
    """Parse the '-' bullet lines of an ingredient block, skipping bold sub-headings."""
    items: List[IngredientItem] = []
    for line in (text or "").splitlines():
        trimmed = line.strip()
        if not trimmed.startswith("-"):
            continue
        content = re.sub(r"^-\s*", "", trimmed).rstrip()
        if not content or content.startswith("**"):
            continue
        items.append(parse_ingredient_line(content))
    return items


def parse_ingredient_sections(text: str) -> List[IngredientSection]:
    """Split an ingredient block on '### ' sub-headings.

    A block without sub-headings becomes one 'Main' section. Sections with no
    bullet items are dropped.
    """
    text = text or ""
    headings = list(_SUBSECTION_RE.finditer(text))
    sections: List[IngredientSection] = []
    for i, match in enumerate(headings):
        end = headings[i + 1].start() if i + 1 < len(headings) else len(text)
        items = parse_ingredient_items(text[match.end():end])
        if items:
            sections.append(IngredientSection(match.group(1).strip(), items))
    if not sections:
        items = parse_ingredient_items(text)
        if items:
            sections.append(IngredientSection("Main", items))
    return sections


def extract_categories(file_path: str) -> Tuple[str, str]:
    """'Recipes/4. Mains/Chicken/file.md' -> ('Mains', 'Chicken')."""
    folders = (file_path or "").split("/")[1:-1]
    category = re.sub(r"^\d+\.\s*", "", folders[0]) if len(folders) >= 1 else ""
    subcategory = re.sub(r"^\d+\.\s*", "", folders[1]) if len(folders) >= 2 else ""
    return category, subcategory


def _as_number(value: float) -> Union[int, float]:
    return int(value) if float(value).is_integer() else value


def parse_number(value) -> Union[int, float]:
    """Parse nutrition-style values: '~380–420' (average), '11g', '4–6 (12 taquitos)'."""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return _as_number(value)
    cleaned = re.sub(r"[~g]", "", str(value))
    range_match = _NUMBER_RANGE_RE.search(cleaned)
    try:
        if range_match:
            avg = (float(range_match.group(1)) + float(range_match.group(2))) / 2
            return int(math.floor(avg + 0.5))
        num_match = _NUMBER_RE.search(cleaned)
        return _as_number(float(num_match.group(1))) if num_match else 0
    except ValueError:
        # e.g. a lone "." matched by the number pattern
        return 0


__all__ = [
    'parse_ingredient_line', 'parse_ingredient_items', 'parse_ingredient_sections', 'extract_ingredient_name',
    'extract_categories', 'parse_number',
]
