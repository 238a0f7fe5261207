"""Core business logic layer.

Subpackages:
- seasonal: ingredient peak-month table and seasonal scoring
- history: recipe stats from the cooking log
- planning: recipe scoring, weekly selection, leftover lunches
- shopping: grocery list consolidation and quantity arithmetic
- parsing: ingredient line parsing
- export: grocery list rendering
"""
__all__ = ["seasonal", "history", "planning", "shopping", "parsing", "export"]
