from datetime import datetime

import pytest

from recipe_search.domain import Ingredient, Instruction, QuantitySpecifier, Recipe


@pytest.fixture
def pancakes() -> Recipe:
    return Recipe(
        recipe_id=1,
        name="Pancakes",
        variation=0,
        description="Basic",
        creation_date_time=datetime(2024, 3, 1, 7, 30, 15),
        last_modified_date_time=datetime(2024, 3, 2, 18, 5, 0),
        ingredients=[
            Ingredient(
                ingredient_id=10,
                ingredient_number=1,
                quantity_specifier=QuantitySpecifier.WHOLE,
                quantity=2.0,
                ingredient="egg",
            )
        ],
        instructions=[
            Instruction(instruction_id=20, instruction_number=1, instruction="Mix"),
        ],
    )


@pytest.fixture
def empty_recipe() -> Recipe:
    return Recipe(
        recipe_id=2,
        name="Water",
        description="Just water",
        creation_date_time=datetime(2023, 12, 31, 23, 59, 59),
        last_modified_date_time=datetime(2024, 1, 1, 0, 0, 0),
    )
