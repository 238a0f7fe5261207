"""Configuration management for the menu planner."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = _as_bool(os.getenv('DEBUG', 'False'))

# Planning defaults
DINNERS_PER_WEEK: Final[int] = int(os.getenv('DINNERS_PER_WEEK', '5'))
LEFTOVER_LUNCHES: Final[bool] = _as_bool(os.getenv('LEFTOVER_LUNCHES', 'true'))
PLAN_CATEGORIES: Final[list[str]] = [
    c.strip() for c in os.getenv('PLAN_CATEGORIES', 'Mains,Soups,Salads').split(',') if c.strip()
]

# Grocery export
TODOIST_API_TOKEN: Final[str] = os.getenv('TODOIST_API_TOKEN', '')
TODOIST_PROJECT_NAME: Final[str] = os.getenv('TODOIST_PROJECT_NAME', 'Grocery List')
GROCERY_EXPORT_PATH: Final[str] = os.getenv('GROCERY_EXPORT_PATH', 'Grocery List.md')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MENUPLAN_DATA_DIR', str(BASE_DIR / 'data')))
