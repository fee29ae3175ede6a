from typing import List, Optional, TypedDict
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

class UpsertPayload(TypedDict, total=False):
    """Body of a catalog upsert. Presence of 'id' turns the create into an update."""
    id: str
    name: str
    tags: List[str]
    img: str
    author: str
    description: str
    workflow: str

class CatalogEntry(BaseModel):
    """Read-only projection of a catalog record."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = Field(validation_alias=AliasChoices("id", "uuid"))
    name: str
    tags: List[str] = Field(default_factory=list)
    price: int = 0  # cents
    image: Optional[str] = Field(default=None, validation_alias=AliasChoices("img", "image"))
    author: str = ""
    description: Optional[str] = None
    requires_review: bool = Field(default=False, validation_alias=AliasChoices("requiresReview", "requires_review"))
    workflow: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def none_tags_to_empty(cls, v):
        return [] if v is None else v

    @property
    def price_label(self) -> str:
        if not self.price:
            return "FREE"
        return f"${self.price // 100}.{self.price % 100:02d}"

class UpsertResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(validation_alias=AliasChoices("id", "uuid"))
    requires_review: bool = Field(default=False, validation_alias=AliasChoices("requiresReview", "requires_review"))
