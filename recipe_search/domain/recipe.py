from typing import List

from pydantic import BaseModel, ConfigDict, Field, NaiveDatetime

from recipe_search.domain.ingredient import Ingredient
from recipe_search.domain.instruction import Instruction


class Recipe(BaseModel):
    """A validated recipe with its ordered ingredients and instructions.

    Timestamps are kept the way the persistence layer hands them over:
    naive datetimes holding UTC wall-clock time. Values carrying a
    zone are rejected.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    recipe_id: int = Field(alias="recipeId")
    name: str
    variation: int = 0
    description: str
    creation_date_time: NaiveDatetime = Field(alias="creationDateTime")
    last_modified_date_time: NaiveDatetime = Field(alias="lastModifiedDateTime")
    ingredients: List[Ingredient] = Field(default_factory=list)
    instructions: List[Instruction] = Field(default_factory=list)
