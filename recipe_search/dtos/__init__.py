from .base_document import INGREDIENT_DOC, INSTRUCTION_DOC, RECIPE_DOC, BaseDocument
from .ingredient_document import IngredientDocument
from .instruction_document import InstructionDocument
from .recipe_document import RecipeDocument
from .search_document import SearchDocument, parse_document

__all__ = [
    "BaseDocument",
    "INGREDIENT_DOC",
    "INSTRUCTION_DOC",
    "IngredientDocument",
    "InstructionDocument",
    "RECIPE_DOC",
    "RecipeDocument",
    "SearchDocument",
    "parse_document",
]
