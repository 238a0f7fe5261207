"""
Input validation schemas using Pydantic for better data integrity.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from menuplan.utilities.constants import CATEGORY_ORDER, DINNER, MAX_DINNERS_PER_WEEK, MEAL_TYPES, STORES


class PlanRequestInput(BaseModel):
    """Schema for weekly plan generation. Missing fields fall back to configuration."""
    count: Optional[int] = Field(None, ge=1, le=MAX_DINNERS_PER_WEEK)
    plan_categories: Optional[List[str]] = None
    week_start: Optional[date] = None
    leftover_lunches: Optional[bool] = None
    seed: Optional[int] = None

    @field_validator('plan_categories')
    @classmethod
    def clean_categories(cls, v):
        """Drop blank category names."""
        if v is None:
            return v
        cleaned = [c.strip() for c in v if c and c.strip()]
        if not cleaned:
            raise ValueError('plan_categories must contain at least one category')
        return cleaned


class CookedMealInput(BaseModel):
    """Schema for a cooking history entry."""
    recipe_id: str = Field(..., min_length=1)
    cooked_date: date
    meal_type: str = DINNER
    notes: str = ""

    @field_validator('recipe_id')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()

    @field_validator('meal_type')
    @classmethod
    def validate_meal_type(cls, v):
        v = v.strip().lower()
        if v not in MEAL_TYPES:
            raise ValueError(f"meal_type must be one of {', '.join(MEAL_TYPES)}")
        return v


class StoreAssignmentInput(BaseModel):
    store: str

    @field_validator('store')
    @classmethod
    def validate_store(cls, v):
        if v not in STORES:
            raise ValueError(f"store must be one of {', '.join(STORES)}")
        return v


class CategoryAssignmentInput(BaseModel):
    category: str

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        v = v.strip().lower()
        if v not in CATEGORY_ORDER:
            raise ValueError(f"category must be one of {', '.join(CATEGORY_ORDER)}")
        return v
