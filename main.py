import logging
import sys
from typing import Iterator

from pydantic import ValidationError

from recipe_search.domain.recipe import Recipe
from recipe_search.global_config import global_config
from recipe_search.opensearch.open_search_client import OpenSearchClient
from recipe_search.services.recipe_index_service import RecipeIndexService

logger = logging.getLogger(__name__)


def load_recipes(jsonl_path: str) -> Iterator[Recipe]:
    """Read recipes from a JSON Lines file.

    Each line is one recipe object. Blank lines are skipped, and so are
    malformed lines so one bad record does not stop the rest.
    """
    with open(jsonl_path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield Recipe.model_validate_json(line)
            except ValidationError as e:
                logger.warning(
                    f"Skipping malformed recipe on line {line_number} of {jsonl_path}: {e}"
                )


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    jsonl_path = argv[0] if argv else "data/recipes.jsonl"

    logging.basicConfig(
        level=global_config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("opensearch").setLevel(logging.WARNING)

    client = OpenSearchClient()
    service = RecipeIndexService(index=global_config.index_name, client=client)

    logger.info(f"Indexing recipes from {jsonl_path} into '{global_config.index_name}'")
    try:
        _, errors = service.index_recipes(
            load_recipes(jsonl_path), chunk_size=global_config.bulk_chunk_size
        )
    finally:
        client.close()

    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
