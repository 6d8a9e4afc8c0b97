"""Budget category API routes."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventbudget.database import get_db
from eventbudget.models.category import Category
from eventbudget.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


async def _get_category_or_404(db: AsyncSession, category_id: int) -> Category:
    category = await db.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("", response_model=list[CategoryResponse])
async def list_categories(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Category).order_by(Category.name.asc()))
    return [CategoryResponse.model_validate(c) for c in result.scalars().all()]


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    data: CategoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    category = Category(name=data.name, icon=data.icon)
    db.add(category)
    await db.flush()
    await db.refresh(category)
    logger.info("Created category %s (%s)", category.id, category.name)
    return CategoryResponse.model_validate(category)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return CategoryResponse.model_validate(await _get_category_or_404(db, category_id))


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    category = await _get_category_or_404(db, category_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(category, k, v)
    await db.flush()
    await db.refresh(category)
    logger.info("Updated category %s", category.id)
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=204)
async def delete_category(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    category = await _get_category_or_404(db, category_id)
    await db.delete(category)
    logger.info("Deleted category %s", category_id)
    return None
