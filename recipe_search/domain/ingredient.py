from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recipe_search.domain.quantity_specifier import QuantitySpecifier


class Ingredient(BaseModel):
    """One ingredient of a recipe, as held by the domain layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ingredient_id: Optional[int] = Field(default=None, alias="ingredientId")
    ingredient_number: int = Field(alias="ingredientNumber")
    quantity_specifier: QuantitySpecifier = Field(
        default=QuantitySpecifier.UNSPECIFIED, alias="quantitySpecifier"
    )
    quantity: Optional[float] = None
    ingredient: str
