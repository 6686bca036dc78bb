from .ingredient import Ingredient
from .instruction import Instruction
from .quantity_specifier import QuantitySpecifier
from .recipe import Recipe

__all__ = [
    "Ingredient",
    "Instruction",
    "QuantitySpecifier",
    "Recipe",
]
