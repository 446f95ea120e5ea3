"""
Recipe routes - community recipe upload and listing.
"""

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from api.dependencies import get_db
from app.exceptions import ServiceValidationError
from domain.mappers import RecipeMapper
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeCreateResponse,
    RecipeResponse,
)
from services.recipe_service import RecipeService, parse_ingredients

router = APIRouter(prefix="/recipe", tags=["Recipes"])
logger = logging.getLogger("chefexpress.api.recipes")


async def _read_upload(upload: Optional[UploadFile]):
    if upload is None or not upload.filename:
        return None, None
    return await upload.read(), upload.content_type


@router.post(
    "", response_model=RecipeCreateResponse, status_code=status.HTTP_201_CREATED
)
async def create_recipe(
    title: str = Form(...),
    description: Optional[str] = Form(None),
    instructions: Optional[str] = Form(None),
    ingredients: Optional[str] = Form(None, description="JSON array of {name, quantity, unit}"),
    owner_id: Optional[UUID] = Form(None),
    is_public: bool = Form(True),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """
    Create a recipe from the multipart upload form.

    - **ingredients**: JSON encoded list; names are de-duplicated against
      existing ingredients
    - **image**: optional picture, returned inline as base64 on reads
    """
    try:
        data = RecipeCreate(
            title=title,
            description=description,
            instructions=instructions,
            ingredients=parse_ingredients(ingredients),
            owner_id=owner_id,
            is_public=is_public,
        )
    except ValidationError as e:
        raise ServiceValidationError(
            "Invalid recipe",
            details={"errors": e.errors(include_url=False, include_context=False)},
        )

    image_bytes, content_type = await _read_upload(image)
    recipe, created_count = RecipeService.create_recipe(
        db, data, image=image_bytes, image_content_type=content_type
    )
    return RecipeCreateResponse(
        message="Recipe and ingredient entries created successfully",
        recipe=RecipeMapper.to_response(recipe),
        new_ingredient_count=created_count,
    )


@router.get("", response_model=List[RecipeResponse])
def list_recipes(
    owner_id_ref: Optional[UUID] = Query(
        default=None, description="Only recipes owned by this user"
    ),
    is_public: Optional[bool] = Query(
        default=None, description="Filter on the public/private flag"
    ),
    db: Session = Depends(get_db),
):
    """List recipes; without filters every recipe is returned."""
    recipes = RecipeService.list_recipes(db, owner_id=owner_id_ref, is_public=is_public)
    return [RecipeMapper.to_response(r) for r in recipes]


@router.post(
    "/image", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED
)
async def upload_recipe_image(
    recipe_id: UUID = Form(...),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """Attach or replace the image of an existing recipe."""
    image_bytes, content_type = await _read_upload(image)
    if image_bytes is None:
        raise ServiceValidationError("No image uploaded")
    recipe = RecipeService.attach_image(db, recipe_id, image_bytes, content_type)
    return RecipeMapper.to_response(recipe)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: UUID, db: Session = Depends(get_db)):
    return RecipeMapper.to_response(RecipeService.get_recipe(db, recipe_id))
