import pytest

from recipe_search.opensearch.mapping import RecipeMapping


@pytest.fixture
def properties():
    return RecipeMapping().create_configurations()["mappings"]["properties"]


@pytest.mark.parametrize("field", ("ingredients", "instructions"))
def test_collections_are_nested_and_included_in_parent(properties, field):
    assert properties[field]["type"] == "nested"
    assert properties[field]["include_in_parent"] is True


def test_scalar_field_types(properties):
    assert properties["_class"]["type"] == "keyword"
    assert properties["id"]["type"] == "long"
    assert properties["name"]["type"] == "text"
    assert properties["variation"]["type"] == "integer"
    assert properties["description"]["type"] == "text"
    assert properties["creationDateTime"]["type"] == "date"
    assert properties["lastModifiedDateTime"]["type"] == "date"


def test_nested_fields_match_documents(properties):
    ingredient_fields = properties["ingredients"]["properties"]
    instruction_fields = properties["instructions"]["properties"]

    assert set(ingredient_fields) == {
        "_class",
        "ingredientId",
        "ingredientNumber",
        "quantitySpecifier",
        "quantity",
        "ingredient",
    }
    assert set(instruction_fields) == {
        "_class",
        "instructionId",
        "instructionNumber",
        "instruction",
    }
