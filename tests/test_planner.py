"""
Tests for the weekly planner view.

This test suite covers:
- Sunday-started week arithmetic and week navigation
- Mapping calendar entries onto the 7 x 3 grid
- Merging client-cached recipes with server recipes
"""

import uuid
from datetime import date, datetime
from types import SimpleNamespace

from test_fixtures import client, create_recipe, register_user
from services.planner_service import (
    merge_recipe_collections,
    sanitize_local_recipe,
    week_dates,
    week_start,
)


def _server_recipe(name, **kwargs):
    defaults = dict(
        recipe_id=uuid.uuid4(),
        name=name,
        description="",
        instructions="",
        owner_id=None,
        is_public=True,
        image=None,
        image_content_type=None,
        created_at=datetime(2024, 12, 1, 9, 30),
        ingredient_links=[],
    )
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


# =============================================================================
# WEEK ARITHMETIC
# =============================================================================


def test_week_start_is_previous_sunday():
    # 2024-12-04 is a Wednesday
    assert week_start(date(2024, 12, 4)) == date(2024, 12, 1)
    assert week_start(date(2024, 12, 7)) == date(2024, 12, 1)


def test_week_start_of_sunday_is_itself():
    assert week_start(date(2024, 12, 1)) == date(2024, 12, 1)


def test_week_dates_navigation():
    current = week_dates(date(2024, 12, 4))
    assert len(current) == 7
    assert current[0] == date(2024, 12, 1)
    assert current[-1] == date(2024, 12, 7)

    assert week_dates(date(2024, 12, 4), -1)[0] == date(2024, 11, 24)
    assert week_dates(date(2024, 12, 4), 1)[0] == date(2024, 12, 8)


def test_week_dates_cross_year_boundary():
    dates = week_dates(date(2025, 1, 1))
    assert dates[0] == date(2024, 12, 29)
    assert dates[-1] == date(2025, 1, 4)


# =============================================================================
# WEEK GRID
# =============================================================================


def test_week_grid_places_recipes_in_slots():
    user = register_user("Gale Grid")
    owner = user["uuid"]
    soup = create_recipe("Tomato Soup", owner_id=owner)
    pasta = create_recipe("Pesto Pasta", owner_id=owner)

    client.post(
        "/api/calendar",
        json={"owner_id": owner, "date_saved": "2024-12-04", "meal": "lunch", "recipe_id": soup["recipe_id"]},
    )
    client.post(
        "/api/calendar",
        json={"owner_id": owner, "date_saved": "2024-12-07", "meal": "dinner", "recipe_id": pasta["recipe_id"]},
    )
    # next week, must not show up
    client.post(
        "/api/calendar",
        json={"owner_id": owner, "date_saved": "2024-12-08", "meal": "dinner", "recipe_id": pasta["recipe_id"]},
    )

    r = client.get("/api/planner/week", params={"owner_id": owner, "anchor": "2024-12-04"})
    assert r.status_code == 200
    week = r.json()
    assert week["week_start"] == "2024-12-01"
    assert week["week_end"] == "2024-12-07"
    assert week["planned_meals"] == 2

    days = week["days"]
    assert [d["weekday"] for d in days][:2] == ["Sunday", "Monday"]
    assert days[3]["date"] == "2024-12-04"
    assert days[3]["lunch"]["name"] == "Tomato Soup"
    assert days[3]["breakfast"] is None
    assert days[6]["dinner"]["recipe_id"] == pasta["recipe_id"]


def test_week_grid_offset_moves_to_next_week():
    user = register_user("Gale Grid")
    owner = user["uuid"]
    pasta = create_recipe("Pesto Pasta", owner_id=owner)
    client.post(
        "/api/calendar",
        json={"owner_id": owner, "date_saved": "2024-12-08", "meal": "dinner", "recipe_id": pasta["recipe_id"]},
    )

    r = client.get(
        "/api/planner/week",
        params={"owner_id": owner, "anchor": "2024-12-04", "offset": 1},
    )
    week = r.json()
    assert week["week_start"] == "2024-12-08"
    assert week["days"][0]["dinner"]["name"] == "Pesto Pasta"


def test_week_grid_unknown_owner_returns_404():
    r = client.get("/api/planner/week", params={"owner_id": str(uuid.uuid4())})
    assert r.status_code == 404


# =============================================================================
# RECIPE MERGE
# =============================================================================


def test_sanitize_local_recipe_fills_gaps():
    clean = sanitize_local_recipe({"id": 17})
    assert clean["id"] == "17"
    assert clean["title"] == "Untitled"
    assert clean["ingredients"] == []
    assert clean["favorite"] is False


def test_merge_server_copy_wins_and_keeps_local_flags():
    server = _server_recipe("Banana Bread")
    merged = merge_recipe_collections(
        [server],
        [
            {"id": "local-1", "title": "  banana   BREAD", "description": "stale copy", "favorite": True},
            {"id": str(server.recipe_id), "title": "Renamed locally", "planned": True},
        ],
    )
    assert len(merged) == 1
    only = merged[0]
    assert only.id == str(server.recipe_id)
    assert only.title == "Banana Bread"
    assert only.description == ""
    assert only.synced is True
    assert only.favorite is True
    assert only.planned is True


def test_merge_appends_local_only_recipes_once():
    merged = merge_recipe_collections(
        [_server_recipe("Banana Bread")],
        [
            {"id": 2, "title": "Miso Soup"},
            {"id": 2, "title": "Miso Soup"},
            {"title": None},
        ],
    )
    assert [m.title for m in merged] == ["Banana Bread", "Miso Soup", "Untitled"]
    assert [m.synced for m in merged] == [True, False, False]


def test_merge_endpoint_uses_owner_recipes():
    user = register_user("Mo Merge")
    create_recipe("Shakshuka", owner_id=user["uuid"])
    create_recipe("Someone Else's Stew")

    r = client.post(
        "/api/planner/recipes",
        json={
            "owner_id": user["uuid"],
            "local_recipes": [
                {"id": "abc", "title": "shakshuka"},
                {"id": "def", "title": "Overnight Oats", "instructions": ["soak", "eat"]},
            ],
        },
    )
    assert r.status_code == 200
    body = r.json()
    assert [(x["title"], x["synced"]) for x in body] == [
        ("Shakshuka", True),
        ("Overnight Oats", False),
    ]
    assert body[1]["instructions"] == ["soak", "eat"]


def test_merge_endpoint_without_owner_returns_local_only():
    r = client.post(
        "/api/planner/recipes", json={"local_recipes": [{"id": "x", "title": "Flatbread"}]}
    )
    assert r.status_code == 200
    assert r.json()[0]["synced"] is False


def test_merge_endpoint_coerces_cached_shapes():
    """
    Verifies:
    - Numeric ids, titles and timestamps from localStorage are turned into text
    - A non-list ingredients value falls back to an empty list
    """
    r = client.post(
        "/api/planner/recipes",
        json={
            "local_recipes": [
                {"id": 1, "title": "Oats", "ingredients": "eggs"},
                {"id": 2, "title": "Porridge", "created": 1733300000000},
                {"id": 3, "title": 42, "image": 7},
            ]
        },
    )
    assert r.status_code == 200
    body = r.json()
    assert [x["id"] for x in body] == ["1", "2", "3"]
    assert body[0]["ingredients"] == []
    assert body[1]["created"] == "1733300000000"
    assert body[2]["title"] == "42"
    assert body[2]["image"] is None
    assert all(x["synced"] is False for x in body)


def test_sanitize_local_recipe_coerces_types():
    clean = sanitize_local_recipe(
        {"id": 5, "title": 3.5, "description": 12, "instructions": ["mix"], "ingredients": {"a": 1}}
    )
    assert clean["title"] == "3.5"
    assert clean["description"] == "12"
    assert clean["instructions"] == ["mix"]
    assert clean["ingredients"] == []


def test_week_grid_query_count_does_not_grow_with_entries(db_session):
    """
    Verifies:
    - Building a week issues the same number of statements for one planned
      meal as for a full week of them
    """
    from sqlalchemy import event

    from test_fixtures import engine
    from services.planner_service import PlannerService

    user = register_user("Nia Count")
    owner = uuid.UUID(user["uuid"])
    recipe = create_recipe("Rice Bowl", owner_id=user["uuid"])

    def planned_week_statements():
        statements = []

        def count(conn, cursor, statement, parameters, context, executemany):
            statements.append(statement)

        event.listen(engine, "before_cursor_execute", count)
        try:
            week = PlannerService.build_week(db_session, owner, anchor=date(2024, 12, 4))
        finally:
            event.remove(engine, "before_cursor_execute", count)
        # end the read transaction so the next round starts cold
        db_session.rollback()
        return week, len(statements)

    client.post(
        "/api/calendar",
        json={"owner_id": user["uuid"], "date_saved": "2024-12-01", "meal": "lunch", "recipe_id": recipe["recipe_id"]},
    )
    week, single = planned_week_statements()
    assert week.planned_meals == 1

    for day in range(2, 8):
        client.post(
            "/api/calendar",
            json={"owner_id": user["uuid"], "date_saved": f"2024-12-0{day}", "meal": "dinner", "recipe_id": recipe["recipe_id"]},
        )
    week, full = planned_week_statements()
    assert week.planned_meals == 7
    assert full == single
