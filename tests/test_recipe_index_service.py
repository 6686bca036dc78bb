from unittest.mock import MagicMock, patch

import pytest
from opensearchpy import NotFoundError

from recipe_search.domain import Ingredient
from recipe_search.dtos import IngredientDocument, RecipeDocument
from recipe_search.exceptions import DocumentTypeError
from recipe_search.services.recipe_index_service import RecipeIndexService


@pytest.fixture
def es():
    return MagicMock()


@pytest.fixture
def service(es):
    client = MagicMock()
    client.get_client.return_value = es
    return RecipeIndexService(index="recipes", client=client)


def test_index_recipe_sends_converted_document(service, es, pancakes):
    doc = service.index_recipe(pancakes)

    es.index.assert_called_once_with(index="recipes", id="1", body=doc.to_source())
    assert doc == RecipeDocument.create(pancakes)


def test_bulk_actions_are_index_operations(service, pancakes, empty_recipe):
    actions = list(service.bulk_actions([pancakes, empty_recipe]))

    assert [a["_id"] for a in actions] == ["1", "2"]
    assert all(a["_op_type"] == "index" for a in actions)
    assert all(a["_index"] == "recipes" for a in actions)
    assert actions[0]["_source"] == RecipeDocument.create(pancakes).to_source()


def test_index_recipes_reports_successes(service, es, pancakes, empty_recipe):
    consumed = []

    def fake_bulk(client, actions, **kwargs):
        consumed.extend(actions)
        return len(consumed), []

    with patch(
        "recipe_search.services.recipe_index_service.helpers.bulk",
        side_effect=fake_bulk,
    ) as bulk:
        success, errors = service.index_recipes([pancakes, empty_recipe], chunk_size=50)

    assert (success, errors) == (2, [])
    assert bulk.call_args.args[0] is es
    assert bulk.call_args.kwargs["chunk_size"] == 50
    assert bulk.call_args.kwargs["raise_on_error"] is False
    assert len(consumed) == 2


def test_index_recipes_returns_failures(service, pancakes):
    failure = {"index": {"_id": "1", "status": 400, "error": "mapper_parsing_exception"}}

    with patch(
        "recipe_search.services.recipe_index_service.helpers.bulk",
        return_value=(0, [failure]),
    ):
        success, errors = service.index_recipes([pancakes])

    assert success == 0
    assert errors == [failure]


def test_get_recipe_document(service, es, pancakes):
    stored = RecipeDocument.create(pancakes)
    es.get.return_value = {"_id": "1", "_source": stored.to_source()}

    doc = service.get_recipe_document(1)

    es.get.assert_called_once_with(index="recipes", id="1")
    assert isinstance(doc, RecipeDocument)
    assert doc.to_source() == stored.to_source()


def test_get_missing_recipe_returns_none(service, es):
    es.get.side_effect = NotFoundError(404, "not_found", {})

    assert service.get_recipe_document(99) is None


def test_get_recipe_document_rejects_other_kinds(service, es):
    other = IngredientDocument.create(Ingredient(ingredient_number=1, ingredient="egg"))
    es.get.return_value = {"_id": "3", "_source": other.to_source()}

    with pytest.raises(DocumentTypeError):
        service.get_recipe_document(3)


def test_delete_recipe(service, es):
    assert service.delete_recipe(1) is True
    es.delete.assert_called_once_with(index="recipes", id="1")


def test_delete_missing_recipe(service, es):
    es.delete.side_effect = NotFoundError(404, "not_found", {})

    assert service.delete_recipe(1) is False


def test_client_health(service, es):
    es.cluster.health.return_value = {"status": "green"}

    assert service.client_health() == {"status": "green"}
