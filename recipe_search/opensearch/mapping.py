from typing import Any, Dict


class RecipeMapping:
    """Index mappings for the recipes index.

    Ingredients and instructions are ``nested`` so one ingredient's fields are
    never matched in combination with another's, and ``include_in_parent``
    copies their fields onto the recipe for plain combined-field queries.
    """

    @staticmethod
    def _text_with_keyword() -> Dict[str, Any]:
        return {
            "type": "text",
            "fields": {"keyword": {"type": "keyword", "ignore_above": 256}},
        }

    def ingredient_properties(self) -> Dict[str, Any]:
        return {
            "_class": {"type": "keyword", "index": False, "doc_values": False},
            "ingredientId": {"type": "long"},
            "ingredientNumber": {"type": "integer"},
            "quantitySpecifier": {"type": "keyword"},
            "quantity": {"type": "double"},
            "ingredient": self._text_with_keyword(),
        }

    def instruction_properties(self) -> Dict[str, Any]:
        return {
            "_class": {"type": "keyword", "index": False, "doc_values": False},
            "instructionId": {"type": "long"},
            "instructionNumber": {"type": "integer"},
            "instruction": {"type": "text"},
        }

    def create_configurations(self) -> Dict[str, Any]:
        """Return the OpenSearch mappings dictionary for the recipes index."""

        configurations = {
            "mappings": {
                "properties": {
                    "_class": {"type": "keyword", "index": False, "doc_values": False},
                    "id": {"type": "long"},
                    "name": self._text_with_keyword(),
                    "variation": {"type": "integer"},
                    "description": {"type": "text"},
                    "creationDateTime": {"type": "date"},
                    "lastModifiedDateTime": {"type": "date"},
                    "ingredients": {
                        "type": "nested",
                        "include_in_parent": True,
                        "properties": self.ingredient_properties(),
                    },
                    "instructions": {
                        "type": "nested",
                        "include_in_parent": True,
                        "properties": self.instruction_properties(),
                    },
                }
            }
        }
        return configurations
