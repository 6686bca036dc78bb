from abc import ABC, abstractmethod

from opensearchpy import OpenSearch


class ABCClient(ABC):
    """Abstract base class for clients handing out an OpenSearch connection."""

    @abstractmethod
    def get_client(self) -> OpenSearch:
        """Return an instance of the OpenSearch client."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Close the connection if one was opened."""
        raise NotImplementedError
