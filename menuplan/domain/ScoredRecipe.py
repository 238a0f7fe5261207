"""Scoring results: a recipe, its desirability score and the rules that produced it."""
from typing import List, Optional

from menuplan.domain.Recipe import Recipe


class ScoreReason:
    def __init__(self, rule: str, delta: float, detail: Optional[List[str]] = None):
        self.rule = rule
        self.delta = delta
        self.detail = detail[:] if detail else []

    def describe(self) -> str:
        label = self.rule.replace("_", " ").capitalize()
        if self.detail:
            label += ": " + ", ".join(self.detail)
        sign = "+" if self.delta >= 0 else ""
        return f"{label} ({sign}{self.delta:g})"

    def __str__(self) -> str:
        return self.describe()

    __repr__ = __str__

    def to_dict(self):
        data = {"rule": self.rule, "delta": self.delta}
        if self.detail:
            data["detail"] = self.detail
        return data


class ScoredRecipe:
    def __init__(self, recipe: Recipe, score: float = 0.0, reasons: Optional[List[ScoreReason]] = None):
        self.recipe = recipe
        self.score = score
        self.reasons = reasons[:] if reasons else []

    def rules(self) -> List[str]:
        return [r.rule for r in self.reasons]

    def __str__(self) -> str:
        return f"{self.recipe.title}: {self.score:.1f} ({'; '.join(r.describe() for r in self.reasons)})"

    __repr__ = __str__

    def to_dict(self):
        return {
            "recipe_id": self.recipe.id,
            "title": self.recipe.title,
            "score": round(self.score, 2),
            "reasons": [r.to_dict() for r in self.reasons],
        }
