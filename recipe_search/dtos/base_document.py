from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

RECIPE_DOC = "RecipeDoc"
INGREDIENT_DOC = "IngredientDoc"
INSTRUCTION_DOC = "InstructionDoc"


class BaseDocument(BaseModel):
    """Shared envelope for documents stored in the recipes index.

    Every variant declares its own ``document_class`` literal, stored under
    ``_class`` so a document read back from OpenSearch can be validated into
    the right model (see ``search_document.SearchDocument``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_source(self) -> Dict[str, Any]:
        """Return the ``_source`` body sent to OpenSearch."""

        return self.model_dump(mode="json", by_alias=True)
