from typing import Literal, Optional

from pydantic import Field

from recipe_search.domain.ingredient import Ingredient
from recipe_search.domain.quantity_specifier import QuantitySpecifier
from recipe_search.dtos.base_document import INGREDIENT_DOC, BaseDocument


class IngredientDocument(BaseDocument):
    """A DTO for one ingredient nested inside a recipe document."""

    document_class: Literal["IngredientDoc"] = Field(
        default=INGREDIENT_DOC, alias="_class"
    )

    ingredientId: Optional[int] = None
    ingredientNumber: int
    quantitySpecifier: QuantitySpecifier = QuantitySpecifier.UNSPECIFIED
    quantity: Optional[float] = None
    ingredient: str

    @classmethod
    def create(cls, ingredient: Ingredient) -> "IngredientDocument":
        """Copy a domain ingredient into its document form."""

        return cls(
            ingredientId=ingredient.ingredient_id,
            ingredientNumber=ingredient.ingredient_number,
            quantitySpecifier=ingredient.quantity_specifier,
            quantity=ingredient.quantity,
            ingredient=ingredient.ingredient,
        )
