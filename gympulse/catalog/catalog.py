"""Builtin exercise catalog.

Read-only reference data: body-part categories and their default
exercises. User-added exercises live in the snapshot registry and are
appended after the builtin ones.
"""

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Catalog(BaseModel):
    """Categories in display order plus builtin exercises per category."""

    model_config = ConfigDict(frozen=True)

    categories: tuple[Category, ...]
    exercises_by_category: dict[str, tuple[str, ...]]

    def category(self, category_id: str) -> Category | None:
        return next((c for c in self.categories if c.id == category_id), None)


BUILTIN_CATALOG = Catalog(
    categories=(
        Category(id="chest", name="Chest"),
        Category(id="back", name="Back"),
        Category(id="legs", name="Legs"),
        Category(id="arms", name="Arms"),
        Category(id="shoulders", name="Shoulders"),
    ),
    exercises_by_category={
        "chest": ("Bench Press", "Incline Dumbbell Press", "Push-ups", "Cable Flys"),
        "back": ("Pull-ups", "Lat Pulldowns", "Bent Over Rows", "Deadlift"),
        "legs": ("Squats", "Leg Press", "Lunges", "Calf Raises"),
        "arms": ("Bicep Curls", "Tricep Dips", "Hammer Curls", "Skullcrushers"),
        "shoulders": ("Overhead Press", "Lateral Raises", "Front Raises", "Face Pulls"),
    },
)


def get_catalog() -> Catalog:
    return BUILTIN_CATALOG


def exercises_for(
    category_id: str,
    custom_exercises: Mapping[str, Sequence[str]] | None = None,
    catalog: Catalog | None = None,
) -> list[str]:
    """Builtin exercises of a category followed by the user's custom ones.

    Unknown categories yield only custom exercises (usually none).
    """
    catalog = catalog or BUILTIN_CATALOG
    builtin = catalog.exercises_by_category.get(category_id, ())
    custom = (custom_exercises or {}).get(category_id, ())
    return [*builtin, *custom]
