"""Category catalog models — the seed categories known to the app."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Subcategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    prompts: list[str] = Field(default_factory=list)


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    subcategories: list[Subcategory] = Field(default_factory=list)


class CategoryCatalog(BaseModel):
    """Ordered set of catalog categories."""

    model_config = ConfigDict(frozen=True)

    categories: list[Category] = Field(default_factory=list)

    @property
    def titles(self) -> set[str]:
        return {c.title.strip() for c in self.categories}
