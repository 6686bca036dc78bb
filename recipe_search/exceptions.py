class RecipeSearchError(Exception):
    """Base class for errors raised by the recipe search layer."""


class DocumentTypeError(RecipeSearchError):
    """A stored document is not the variant the caller asked for."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Expected a '{expected}' document, got '{actual}'")
        self.expected = expected
        self.actual = actual
