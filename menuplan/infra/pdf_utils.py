import io
from typing import Iterable, Mapping

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from menuplan.domain.GroceryItem import GroceryItem
from menuplan.domain.Plan import WeeklyPlan
from menuplan.domain.Recipe import Recipe
from menuplan.logic.shopping.categories import category_label
from menuplan.logic.shopping.list_builder import group_by_category

_HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 12),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
]


def _build(elements, pagesize) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=pagesize, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)
    doc.build(elements)
    return buf.getvalue()


def generate_pdf_for_week(plan: WeeklyPlan, recipes: Mapping[str, Recipe]):
    """Generate a PDF table: Date / Day / Meal / Recipe / Servings for the provided plan."""
    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Plan, week of {plan.week_start.isoformat()}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Date", "Day", "Meal", "Recipe", "Servings"]]
    for meal in plan.meals:
        recipe = recipes.get(meal.recipe_id)
        title = recipe.title if recipe else meal.recipe_id
        if meal.is_leftover:
            title += " (leftovers)"
        data.append([
            meal.planned_date.isoformat(),
            meal.planned_date.strftime("%A"),
            meal.meal_type.capitalize(),
            title,
            f"{meal.servings:g}" if isinstance(meal.servings, (int, float)) else str(meal.servings),
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(_HEADER_STYLE + [("ALIGN", (0, 0), (-1, -1), "CENTER")]))
    elements.append(table)
    return _build(elements, landscape(A4))


def generate_pdf_for_grocery_list(items: Iterable[GroceryItem]):
    """Generate a PDF grocery checklist, one table per category."""
    styles = getSampleStyleSheet()
    elements = [Paragraph("Grocery list", styles["Title"]), Spacer(1, 12)]

    for category, group in group_by_category(items).items():
        elements.append(Paragraph(category_label(category), styles["Heading2"]))
        data = [["", "Item", "Store", "For"]]
        for item in group:
            data.append([
                "[x]" if item.checked else "[ ]",
                item.display_text(),
                item.store,
                ", ".join(item.from_recipes),
            ])
        table = Table(data, repeatRows=1, hAlign="LEFT")
        table.setStyle(TableStyle(_HEADER_STYLE + [("ALIGN", (0, 0), (-1, -1), "LEFT")]))
        elements.extend([table, Spacer(1, 10)])

    return _build(elements, A4)
