"""Pydantic models for data validation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemType(str, Enum):
    """Kinds of searchable catalog items."""

    CATEGORY = "category"
    PROFESSION = "profession"
    PROFESSIONAL = "professional"

    @property
    def rank(self) -> int:
        """Display order: categories first, then professions, then professionals."""
        return _ITEM_TYPE_RANK[self]


_ITEM_TYPE_RANK = {
    ItemType.CATEGORY: 0,
    ItemType.PROFESSION: 1,
    ItemType.PROFESSIONAL: 2,
}


class DistanceBand(BaseModel):
    """Edit distance allowed for tokens up to a given length."""

    max_token_length: int = Field(..., ge=1, description="Longest token this band applies to")
    max_distance: int = Field(..., ge=0, description="Edits tolerated for such tokens")

    model_config = ConfigDict(frozen=True)


class MatchThresholds(BaseModel):
    """Tuning table for the per-token fuzzy test.

    The defaults give short tokens (up to 4 characters) one edit and longer
    tokens two. Tokens shorter than ``min_token_length`` only match as
    substrings.
    """

    min_token_length: int = Field(3, ge=1, description="Shortest token eligible for typo tolerance")
    bands: list[DistanceBand] = Field(
        default_factory=lambda: [DistanceBand(max_token_length=4, max_distance=1)],
        description="Distance bands, applied in ascending max_token_length order",
    )
    default_max_distance: int = Field(2, ge=0, description="Distance for tokens beyond every band")

    model_config = ConfigDict(frozen=True)

    @field_validator("bands")
    @classmethod
    def sort_bands(cls, bands: list[DistanceBand]) -> list[DistanceBand]:
        return sorted(bands, key=lambda band: band.max_token_length)

    def max_distance_for(self, token_length: int) -> int:
        """Return the edit distance tolerated for a token of this length."""
        for band in self.bands:
            if token_length <= band.max_token_length:
                return band.max_distance
        return self.default_max_distance


class SearchItem(BaseModel):
    """A category, profession or professional offered by the search bar."""

    id: str
    type: ItemType
    label: str
    sublabel: str = ""
    avatar_url: str | None = None
    rating: float | None = Field(None, ge=0, le=5)
    verified: bool = False
    link: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def searchable_text(self) -> str:
        return f"{self.label} {self.sublabel}"


class SearchResults(BaseModel):
    """Outcome of a catalog search."""

    query: str
    total: int = Field(0, ge=0, description="Matches before the limit was applied")
    items: list[SearchItem] = Field(default_factory=list)
