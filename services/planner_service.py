"""Weekly meal planner: calendar grid and recipe collection merge"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from domain.mappers import RecipeMapper
from domain.models import Recipe
from domain.schemas.calendar_schemas import DayPlan, MergedRecipe, WeekPlanResponse
from repositories import CalendarRepository, RecipeRepository, UserRepository
from repositories.ingredient_repository import normalize_ingredient_name

logger = logging.getLogger("chefexpress.planner")

DAYS_PER_WEEK = 7


def week_start(anchor: date) -> date:
    """Sunday on or before the anchor date (weeks run Sunday to Saturday)."""
    # date.weekday(): Monday == 0 ... Sunday == 6
    return anchor - timedelta(days=(anchor.weekday() + 1) % DAYS_PER_WEEK)


def week_dates(anchor: date, offset: int = 0) -> List[date]:
    """The seven dates of the week containing anchor, moved by offset weeks."""
    first = week_start(anchor) + timedelta(weeks=offset)
    return [first + timedelta(days=i) for i in range(DAYS_PER_WEEK)]


def _title_key(title: Any) -> str:
    return normalize_ingredient_name(str(title or ""))


def _text(value: Any, default: str = "") -> str:
    if value is None or value == "":
        return default
    return value if isinstance(value, str) else str(value)


def sanitize_local_recipe(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Fill the gaps of a client-cached recipe the same way the planner page does."""
    # localStorage copies may hold numeric ids, timestamps or stale shapes
    instructions = raw.get("instructions")
    ingredients = raw.get("ingredients")
    image = raw.get("image")
    created = raw.get("created")
    return {
        "id": _text(raw.get("id")),
        "title": _text(raw.get("title"), "Untitled"),
        "description": _text(raw.get("description")),
        "instructions": instructions if isinstance(instructions, list) else _text(instructions),
        "ingredients": ingredients if isinstance(ingredients, list) else [],
        "image": image if isinstance(image, str) and image else None,
        "created": None if created in (None, "") else _text(created),
        "favorite": bool(raw.get("favorite", False)),
        "planned": bool(raw.get("planned", False)),
    }


def merge_recipe_collections(
    server_recipes: Iterable[Recipe], local_recipes: Iterable[Dict[str, Any]]
) -> List[MergedRecipe]:
    """
    Merge server-persisted recipes with recipes cached on the client.

    Server copies win. A local recipe is dropped when its id matches a server
    recipe id or its normalised title matches a server recipe name; the rest
    are appended in their original order and flagged as not synced. Local
    favourite/planned flags are carried over onto the matching server copy.
    """
    merged: List[MergedRecipe] = []
    by_id: Dict[str, MergedRecipe] = {}
    by_title: Dict[str, MergedRecipe] = {}

    for recipe in server_recipes:
        dto = RecipeMapper.to_response(recipe)
        item = MergedRecipe(
            id=str(dto.recipe_id),
            title=dto.name,
            description=dto.description or "",
            instructions=dto.instructions or "",
            ingredients=[i.model_dump() for i in dto.ingredients],
            image=dto.image,
            created=dto.created_at.isoformat() if dto.created_at else None,
            synced=True,
        )
        merged.append(item)
        by_id[item.id] = item
        by_title.setdefault(_title_key(item.title), item)

    seen_local = set()
    for position, raw in enumerate(local_recipes):
        local = sanitize_local_recipe(raw)
        match = by_id.get(local["id"]) or by_title.get(_title_key(local["title"]))
        if match:
            match.favorite = match.favorite or local["favorite"]
            match.planned = match.planned or local["planned"]
            continue
        key = local["id"] or _title_key(local["title"])
        if key in seen_local:
            continue
        seen_local.add(key)
        try:
            merged.append(MergedRecipe(**local, synced=False))
        except ValidationError as e:
            raise ServiceValidationError(
                f"Invalid local recipe at position {position}",
                details={"errors": e.errors(include_url=False, include_context=False)},
            )

    return merged


class PlannerService:
    """Business logic behind the weekly planner view."""

    @staticmethod
    def build_week(
        db: Session, owner_id: UUID, anchor: Optional[date] = None, offset: int = 0
    ) -> WeekPlanResponse:
        """Map the owner's calendar entries onto a 7 x 3 grid of meal slots."""
        if not UserRepository(db).exists(owner_id):
            raise NotFoundError(f"User {owner_id} not found")

        dates = week_dates(anchor or date.today(), offset)
        entries = CalendarRepository(db).list_entries(owner_id, dates[0], dates[-1])

        slots: Dict[date, Dict[str, Any]] = {d: {} for d in dates}
        planned = 0
        for entry in entries:
            if entry.recipe_id is None:
                continue
            recipe = entry.recipe
            if recipe is None:
                continue
            slots[entry.date_saved][entry.meal.value] = RecipeMapper.to_summary(recipe)
            planned += 1

        days = [
            DayPlan(date=d, weekday=d.strftime("%A"), **slots[d]) for d in dates
        ]
        logger.info(
            f"week_built owner_id={owner_id} week_start={dates[0]} planned={planned}"
        )
        return WeekPlanResponse(
            owner_id=owner_id,
            week_start=dates[0],
            week_end=dates[-1],
            days=days,
            planned_meals=planned,
        )

    @staticmethod
    def merge_recipes(
        db: Session, owner_id: Optional[UUID], local_recipes: List[Dict[str, Any]]
    ) -> List[MergedRecipe]:
        server = RecipeRepository(db).list_recipes(owner_id=owner_id) if owner_id else []
        merged = merge_recipe_collections(server, local_recipes)
        logger.info(
            f"recipes_merged owner_id={owner_id} server={len(server)} "
            f"local={len(local_recipes)} result={len(merged)}"
        )
        return merged
