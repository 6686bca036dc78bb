from typing import Annotated, Any, Dict, Union

from pydantic import Field, TypeAdapter

from recipe_search.dtos.ingredient_document import IngredientDocument
from recipe_search.dtos.instruction_document import InstructionDocument
from recipe_search.dtos.recipe_document import RecipeDocument

SearchDocument = Annotated[
    Union[RecipeDocument, IngredientDocument, InstructionDocument],
    Field(discriminator="document_class"),
]

_search_document_adapter: TypeAdapter[SearchDocument] = TypeAdapter(SearchDocument)


def parse_document(source: Dict[str, Any]) -> SearchDocument:
    """Validate a stored ``_source`` into the variant named by its ``_class``.

    Raises:
        pydantic.ValidationError: if ``_class`` is missing or unknown, or the
            body does not fit the variant.
    """

    return _search_document_adapter.validate_python(source)
