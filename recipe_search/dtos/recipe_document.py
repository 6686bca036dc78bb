import logging
from datetime import datetime, timezone
from typing import Literal, Tuple

from pydantic import Field, field_validator

from recipe_search.domain.recipe import Recipe
from recipe_search.dtos.base_document import RECIPE_DOC, BaseDocument
from recipe_search.dtos.ingredient_document import IngredientDocument
from recipe_search.dtos.instruction_document import InstructionDocument

logger = logging.getLogger(__name__)


def as_utc_instant(value: datetime) -> datetime:
    """Pin a datetime to UTC.

    The wall-clock fields are kept as they are and read as UTC; any zone the
    value carries is replaced, never converted.
    """

    return value.replace(tzinfo=timezone.utc)


class RecipeDocument(BaseDocument):
    """A DTO for recipes to be indexed in OpenSearch.

    ``ingredients`` and ``instructions`` are mapped as nested objects with
    ``include_in_parent`` (see ``RecipeMapping``), so their fields can be
    searched together with the recipe's own fields.
    """

    document_class: Literal["RecipeDoc"] = Field(default=RECIPE_DOC, alias="_class")

    id: int
    name: str
    variation: int = 0
    description: str
    creationDateTime: datetime
    lastModifiedDateTime: datetime

    ingredients: Tuple[IngredientDocument, ...] = ()
    instructions: Tuple[InstructionDocument, ...] = ()

    @field_validator("creationDateTime", "lastModifiedDateTime")
    @classmethod
    def _pin_to_utc(cls, value: datetime) -> datetime:
        return as_utc_instant(value)

    @classmethod
    def create(cls, recipe: Recipe) -> "RecipeDocument":
        """Build the document graph for a recipe.

        Ingredients and instructions keep the order of the domain lists.

        Args:
            recipe (Recipe): The recipe to convert.
        Returns:
            RecipeDocument: The populated document.
        """

        document = cls(
            id=recipe.recipe_id,
            name=recipe.name,
            variation=recipe.variation,
            description=recipe.description,
            creationDateTime=recipe.creation_date_time,
            lastModifiedDateTime=recipe.last_modified_date_time,
            ingredients=tuple(IngredientDocument.create(i) for i in recipe.ingredients),
            instructions=tuple(
                InstructionDocument.create(i) for i in recipe.instructions
            ),
        )
        logger.debug(
            f"Converted recipe {document.id} with {len(document.ingredients)} "
            f"ingredients and {len(document.instructions)} instructions"
        )
        return document
