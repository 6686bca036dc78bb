from enum import Enum


class QuantitySpecifier(str, Enum):
    """Unit or qualifier attached to an ingredient quantity."""

    UNSPECIFIED = "UNSPECIFIED"
    WHOLE = "WHOLE"
    TO_TASTE = "TO_TASTE"
    PINCH = "PINCH"
    DASH = "DASH"
    TEASPOON = "TEASPOON"
    TABLESPOON = "TABLESPOON"
    FLUID_OUNCE = "FLUID_OUNCE"
    CUP = "CUP"
    PINT = "PINT"
    QUART = "QUART"
    GALLON = "GALLON"
    OUNCE = "OUNCE"
    POUND = "POUND"
    MILLILITER = "MILLILITER"
    LITER = "LITER"
    GRAM = "GRAM"
    KILOGRAM = "KILOGRAM"
