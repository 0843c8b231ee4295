from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dualpascal.i18n import Locale


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Category name, unique per locale.")
    description: Optional[str] = None
    locale: Locale = Field(Locale.JA, description="Locale the category belongs to.")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class CategoryBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    locale: str


class CategoryResponse(CategoryBrief):
    description: Optional[str] = None
    created_at: datetime


class CategoryWithCount(CategoryResponse):
    article_count: int = 0


class CategoryIndexResponse(BaseModel):
    ja: list[CategoryWithCount]
    en: list[CategoryWithCount]
