import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from opensearchpy import NotFoundError, helpers

from recipe_search.domain.recipe import Recipe
from recipe_search.dtos.base_document import RECIPE_DOC
from recipe_search.dtos.recipe_document import RecipeDocument
from recipe_search.dtos.search_document import parse_document
from recipe_search.exceptions import DocumentTypeError
from recipe_search.opensearch.abstract_classes import ABCClient

logger = logging.getLogger(__name__)


class RecipeIndexService:
    """
    Service for writing recipe documents to OpenSearch and reading them back by id.
    """

    def __init__(
        self,
        index: str,
        client: ABCClient,
    ):
        """Bind the service to one index and a client provider.

        Args:
            index (str): The name of the index to operate on.
            client (ABCClient): An instance of ABCClient to interact with OpenSearch.
        """
        self._client = client
        self._index = index

    def index_recipe(self, recipe: Recipe) -> RecipeDocument:
        """Convert a recipe and index it under its recipe id.

        Args:
            recipe (Recipe): The recipe to index.
        Returns:
            RecipeDocument: The document that was sent.
        """
        document = RecipeDocument.create(recipe)
        es = self._client.get_client()
        es.index(index=self._index, id=str(document.id), body=document.to_source())
        logger.info(f"Indexed recipe {document.id} into '{self._index}'")
        return document

    def bulk_actions(self, recipes: Iterable[Recipe]) -> Iterator[Dict[str, Any]]:
        """Yield bulk index actions, converting recipes as they are consumed."""
        for recipe in recipes:
            document = RecipeDocument.create(recipe)
            yield {
                "_op_type": "index",
                "_index": self._index,
                "_id": str(document.id),
                "_source": document.to_source(),
            }

    def index_recipes(
        self, recipes: Iterable[Recipe], chunk_size: int = 500
    ) -> Tuple[int, List[Any]]:
        """Bulk index recipes.

        Per-document failures are collected rather than raised.

        Args:
            recipes (Iterable[Recipe]): Recipes to index.
            chunk_size (int, optional): Documents per bulk request. Defaults to 500.
        Returns:
            Tuple[int, List[Any]]: The number of successes and the failed items.
        """
        success, errors = helpers.bulk(
            self._client.get_client(),
            self.bulk_actions(recipes),
            chunk_size=chunk_size,
            raise_on_error=False,
        )

        if errors:
            logger.warning(
                f"Bulk completed with {len(errors)} errors and {success} successes."
            )
            # a few samples are enough to diagnose
            for err in errors[:5]:
                logger.warning(f"Sample bulk error: {err}")
        else:
            logger.info(f"Bulk completed successfully. Indexed {success} documents.")

        return success, errors

    def get_recipe_document(self, recipe_id: int) -> Optional[RecipeDocument]:
        """Fetch the stored document of a recipe.

        Returns:
            Optional[RecipeDocument]: The document, or None if it is not indexed.
        Raises:
            DocumentTypeError: if the id holds a document of another kind.
        """
        es = self._client.get_client()
        try:
            response = es.get(index=self._index, id=str(recipe_id))
        except NotFoundError:
            logger.debug(f"Recipe {recipe_id} not found in '{self._index}'")
            return None

        document = parse_document(response["_source"])
        if not isinstance(document, RecipeDocument):
            raise DocumentTypeError(RECIPE_DOC, document.document_class)
        return document

    def delete_recipe(self, recipe_id: int) -> bool:
        """Delete a recipe document. Returns False if it was not indexed."""
        es = self._client.get_client()
        try:
            es.delete(index=self._index, id=str(recipe_id))
        except NotFoundError:
            return False
        logger.info(f"Deleted recipe {recipe_id} from '{self._index}'")
        return True

    def client_health(self):
        """Check the health of the OpenSearch client."""
        es = self._client.get_client()
        return es.cluster.health()
