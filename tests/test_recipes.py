"""
Tests for community recipes and saved recipes.

This test suite covers:
- Multipart recipe upload with ingredients and an optional image
- Ingredient de-duplication: N ingredients with K already known create N - K
- Recipe creation is all-or-nothing
- Owner and visibility filters on the recipe list
- Bookmarking recipes (saveRecipe)
"""

import base64
import uuid

import pytest

from test_fixtures import (
    client,
    create_recipe,
    post_recipe,
    register_user,
    TestingSessionLocal,
)
from app.config import settings
from app.exceptions import ServiceValidationError
from domain.models import Ingredient, Recipe, RecipeIngredient
from domain.schemas.recipe_schemas import IngredientEntry, RecipeCreate
from repositories import RecipeRepository
from services.recipe_service import RecipeService, parse_ingredients

PANCAKES = [
    {"name": "Flour", "quantity": "2", "unit": "cups"},
    {"name": "Egg", "quantity": 2},
    {"name": "Milk", "quantity": "1.5", "unit": "cups"},
]

# smallest valid GIF
PIXEL = base64.b64decode("R0lGODlhAQABAIAAAAAAAP///ywAAAAAAQABAAACAUwAOw==")


def _count(model) -> int:
    with TestingSessionLocal() as s:
        return s.query(model).count()


# =============================================================================
# CREATE
# =============================================================================


def test_create_recipe_with_ingredients():
    user = register_user()
    r = post_recipe(
        "Fluffy Pancakes",
        PANCAKES,
        owner_id=user["uuid"],
        description="Weekend breakfast",
        instructions="Mix and fry",
    )
    assert r.status_code == 201
    body = r.json()
    assert body["new_ingredient_count"] == 3
    recipe = body["recipe"]
    assert recipe["name"] == "Fluffy Pancakes"
    assert recipe["owner_id"] == user["uuid"]
    assert recipe["is_public"] is True
    assert recipe["image"] is None
    # submission order is kept, names are stored normalised
    assert [i["name"] for i in recipe["ingredients"]] == ["flour", "egg", "milk"]
    assert recipe["ingredients"][1]["quantity"] == "2"
    assert recipe["ingredients"][0]["unit"] == "cups"


def test_known_ingredients_are_reused():
    """
    Verifies:
    - N ingredients with K already stored create exactly N - K new rows
    - One link row per ingredient of the recipe
    """
    create_recipe("Pancakes", PANCAKES)
    assert _count(Ingredient) == 3

    r = post_recipe(
        "Crepes",
        [
            {"name": "  FLOUR ", "quantity": "1", "unit": "cup"},
            {"name": "egg", "quantity": "3"},
            {"name": "Butter", "quantity": "2", "unit": "tbsp"},
            {"name": "Sugar", "quantity": "1", "unit": "tbsp"},
        ],
    )
    assert r.status_code == 201
    assert r.json()["new_ingredient_count"] == 2
    assert _count(Ingredient) == 5

    crepes_id = uuid.UUID(r.json()["recipe"]["recipe_id"])
    with TestingSessionLocal() as s:
        assert RecipeRepository(s).count_links(crepes_id) == 4
    assert _count(RecipeIngredient) == 7


def test_create_recipe_without_ingredients():
    r = post_recipe("Toast")
    assert r.status_code == 201
    assert r.json()["recipe"]["ingredients"] == []
    assert r.json()["new_ingredient_count"] == 0


def test_create_recipe_with_image_inlines_base64():
    r = post_recipe("Tiny Cake", [{"name": "sugar", "quantity": "1"}], image=PIXEL)
    assert r.status_code == 201
    image = r.json()["recipe"]["image"]
    assert image.startswith("data:image/jpeg;base64,")
    assert base64.b64decode(image.split(",", 1)[1]) == PIXEL


def test_create_recipe_private_flag():
    r = post_recipe("Secret Sauce", is_public="false")
    assert r.status_code == 201
    assert r.json()["recipe"]["is_public"] is False


def test_create_recipe_missing_title_is_validation_error():
    r = client.post("/api/recipe", data={"ingredients": "[]"})
    assert r.status_code == 422


def test_create_recipe_blank_title_rejected():
    r = post_recipe("   ")
    assert r.status_code == 400


def test_create_recipe_malformed_ingredients_json():
    r = client.post("/api/recipe", data={"title": "Soup", "ingredients": "{not json"})
    assert r.status_code == 400
    assert "JSON array" in r.json()["error"]["message"]
    assert _count(Recipe) == 0


def test_create_recipe_ingredients_must_be_list():
    r = client.post(
        "/api/recipe", data={"title": "Soup", "ingredients": '{"name": "salt"}'}
    )
    assert r.status_code == 400


def test_create_recipe_duplicate_ingredient_rejected():
    r = post_recipe(
        "Salty Soup",
        [{"name": "Salt", "quantity": "1"}, {"name": "salt ", "quantity": "2"}],
    )
    assert r.status_code == 400
    assert r.json()["error"]["details"]["duplicates"] == ["salt"]
    assert _count(Recipe) == 0
    assert _count(Ingredient) == 0


def test_create_recipe_unknown_owner_rejected():
    r = post_recipe("Orphan", PANCAKES, owner_id=uuid.uuid4())
    assert r.status_code == 400
    assert _count(Recipe) == 0
    assert _count(Ingredient) == 0


def test_create_recipe_rolls_back_on_failure(db_session, monkeypatch):
    """
    Verifies:
    - A failure while linking ingredients leaves no recipe behind
    - Ingredients created earlier in the same call are rolled back too
    """
    original = RecipeRepository.add_ingredient_link
    calls = {"n": 0}

    def flaky_link(self, *args, **kwargs):
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("connection lost")
        return original(self, *args, **kwargs)

    monkeypatch.setattr(RecipeRepository, "add_ingredient_link", flaky_link)

    data = RecipeCreate(
        title="Half Written",
        ingredients=[IngredientEntry(**i) for i in PANCAKES],
    )
    with pytest.raises(RuntimeError):
        RecipeService.create_recipe(db_session, data)

    assert _count(Recipe) == 0
    assert _count(Ingredient) == 0
    assert _count(RecipeIngredient) == 0


def test_parse_ingredients():
    assert parse_ingredients(None) == []
    assert parse_ingredients("  ") == []
    entries = parse_ingredients('[{"name": "rice", "quantity": 200, "unit": "g"}]')
    assert entries[0].quantity == "200"
    with pytest.raises(ServiceValidationError):
        parse_ingredients('[{"name": "   "}]')


# =============================================================================
# LIST & GET
# =============================================================================


def test_owner_filter_returns_only_that_owners_recipes():
    alice = register_user("Alice Baker")
    bob = register_user("Bob Grill")
    create_recipe("Alice Bread", owner_id=alice["uuid"])
    create_recipe("Alice Scones", owner_id=alice["uuid"])
    create_recipe("Bob Ribs", owner_id=bob["uuid"])
    create_recipe("Anonymous Salad")

    r = client.get("/api/recipe", params={"owner_id_ref": alice["uuid"]})
    assert r.status_code == 200
    names = {x["name"] for x in r.json()}
    assert names == {"Alice Bread", "Alice Scones"}

    everything = client.get("/api/recipe").json()
    assert len(everything) == 4


def test_visibility_filter():
    create_recipe("Public Pie")
    create_recipe("Private Pie", is_public="false")

    r = client.get("/api/recipe", params={"is_public": "false"})
    assert [x["name"] for x in r.json()] == ["Private Pie"]


def test_get_recipe_by_id():
    recipe = create_recipe("Lentil Soup", [{"name": "lentils", "quantity": "1", "unit": "cup"}])
    r = client.get(f"/api/recipe/{recipe['recipe_id']}")
    assert r.status_code == 200
    assert r.json()["ingredients"][0]["name"] == "lentils"


def test_get_unknown_recipe_returns_404():
    r = client.get(f"/api/recipe/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


# =============================================================================
# IMAGE UPLOAD
# =============================================================================


def test_create_recipe_oversized_image_rejected(monkeypatch):
    monkeypatch.setattr(settings, "max_image_bytes", 8)
    r = post_recipe("Huge Cake", [{"name": "sugar", "quantity": "1"}], image=PIXEL)
    assert r.status_code == 400
    details = r.json()["error"]["details"]
    assert details["max_bytes"] == 8
    assert details["size"] == len(PIXEL)
    assert _count(Recipe) == 0
    assert _count(Ingredient) == 0


def test_create_recipe_empty_image_rejected():
    r = post_recipe("Empty Cake", image=b"")
    assert r.status_code == 400
    assert "empty" in r.json()["error"]["message"]
    assert _count(Recipe) == 0


def test_upload_image_for_existing_recipe():
    recipe = create_recipe("Plain Rice")
    r = client.post(
        "/api/recipe/image",
        data={"recipe_id": recipe["recipe_id"]},
        files={"image": ("rice.gif", PIXEL, "image/gif")},
    )
    assert r.status_code == 201
    assert r.json()["image"].startswith("data:image/gif;base64,")


def test_upload_image_without_file_rejected():
    recipe = create_recipe("Plain Rice")
    r = client.post("/api/recipe/image", data={"recipe_id": recipe["recipe_id"]})
    assert r.status_code == 400


def test_upload_image_unknown_recipe():
    r = client.post(
        "/api/recipe/image",
        data={"recipe_id": str(uuid.uuid4())},
        files={"image": ("x.gif", PIXEL, "image/gif")},
    )
    assert r.status_code == 404


def test_upload_non_image_rejected():
    recipe = create_recipe("Plain Rice")
    r = client.post(
        "/api/recipe/image",
        data={"recipe_id": recipe["recipe_id"]},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert r.status_code == 400


# =============================================================================
# SAVED RECIPES
# =============================================================================


def test_save_and_list_saved_recipes():
    user = register_user("Jamie Cook")
    recipe = create_recipe("Carbonara", [{"name": "spaghetti", "quantity": "200", "unit": "g"}])

    r = client.post(
        "/api/saveRecipe", json={"user_id": user["uuid"], "recipe_id": recipe["recipe_id"]}
    )
    assert r.status_code == 200
    assert r.json() == {"message": "Recipe saved successfully"}

    saved = client.get("/api/saveRecipe", params={"userId": user["uuid"]})
    assert saved.status_code == 200
    assert [x["name"] for x in saved.json()] == ["Carbonara"]
    assert saved.json()[0]["ingredients"][0]["name"] == "spaghetti"


def test_save_recipe_twice_rejected():
    user = register_user("Jamie Cook")
    recipe = create_recipe("Carbonara")
    body = {"user_id": user["uuid"], "recipe_id": recipe["recipe_id"]}
    assert client.post("/api/saveRecipe", json=body).status_code == 200

    r = client.post("/api/saveRecipe", json=body)
    assert r.status_code == 400


def test_save_unknown_recipe_returns_404():
    user = register_user("Jamie Cook")
    r = client.post(
        "/api/saveRecipe", json={"user_id": user["uuid"], "recipe_id": str(uuid.uuid4())}
    )
    assert r.status_code == 404


def test_save_for_unknown_user_returns_404():
    recipe = create_recipe("Carbonara")
    r = client.post(
        "/api/saveRecipe",
        json={"user_id": str(uuid.uuid4()), "recipe_id": recipe["recipe_id"]},
    )
    assert r.status_code == 404


def test_list_saved_recipes_empty_returns_404():
    user = register_user("Jamie Cook")
    r = client.get("/api/saveRecipe", params={"userId": user["uuid"]})
    assert r.status_code == 404
