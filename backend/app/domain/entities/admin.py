"""
Entités d'administration - Domain Layer
Catégories de navigation et contenus éditables des pages.

L'API d'administration expose ses champs en camelCase : les schémas
*Create/*Update/*Read héritent de CamelModel, la table reste en snake_case.
"""
from sqlmodel import SQLModel, Field
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
import datetime as dt
from uuid import UUID, uuid4

from .validators import non_nullable


class CamelModel(BaseModel):
    """Schéma API en camelCase, lisible depuis une entité SQLModel"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AdminCategory(SQLModel, table=True):
    __tablename__ = "admin_categories"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    category_name: str
    icon_name: str
    route_path: str
    display_order: int = Field(default=0, index=True)
    is_active: bool = Field(default=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class AdminCategoryCreate(CamelModel):
    category_name: str
    icon_name: str
    route_path: str
    display_order: int = 0
    is_active: bool = True


class AdminCategoryUpdate(CamelModel):
    category_name: Optional[str] = None
    icon_name: Optional[str] = None
    route_path: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    _required = non_nullable("category_name", "icon_name", "route_path", "display_order", "is_active")


class AdminCategoryRead(CamelModel):
    id: UUID
    category_name: str
    icon_name: str
    route_path: str
    display_order: int
    is_active: bool
    created_at: dt.datetime
    updated_at: dt.datetime


class AdminContent(SQLModel, table=True):
    __tablename__ = "admin_content"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    page_name: str = Field(index=True)
    content_type: str
    content_key: str
    content_value: str
    display_order: int = Field(default=0)
    is_active: bool = Field(default=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class AdminContentCreate(CamelModel):
    page_name: str
    content_type: str
    content_key: str
    content_value: str
    display_order: int = 0
    is_active: bool = True


class AdminContentUpdate(CamelModel):
    page_name: Optional[str] = None
    content_type: Optional[str] = None
    content_key: Optional[str] = None
    content_value: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    _required = non_nullable(
        "page_name", "content_type", "content_key", "content_value", "display_order", "is_active"
    )


class AdminContentRead(CamelModel):
    id: UUID
    page_name: str
    content_type: str
    content_key: str
    content_value: str
    display_order: int
    is_active: bool
    created_at: dt.datetime
    updated_at: dt.datetime
