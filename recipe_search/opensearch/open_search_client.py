import logging

import boto3
from opensearchpy import OpenSearch, RequestsHttpConnection
from requests_aws4auth import AWS4Auth

from recipe_search.global_config import GlobalConfig, global_config
from .abstract_classes import ABCClient

logger = logging.getLogger(__name__)


class OpenSearchClient(ABCClient):
    """Singleton OpenSearch client for connecting to an OpenSearch cluster.
    Implements the singleton pattern to ensure only one instance of the client exists.
    """

    _instance = None
    _client: OpenSearch | None = None
    _initialized = False

    def __new__(cls, *args, **kwargs):
        """Create a singleton instance of OpenSearchClient.

        Returns:
            OpenSearchClient: The singleton instance of OpenSearchClient.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config: GlobalConfig = global_config):
        """Initialize the OpenSearchClient.

        Args:
            config (GlobalConfig, optional): Connection settings. Only the
                first construction is honoured. Defaults to ``global_config``.
        """
        if self.__class__._initialized:
            return

        self.config = config
        self.__class__._initialized = True

    @classmethod
    def reset(cls):
        """Forget the singleton and its cached connection."""
        cls._instance = None
        cls._client = None
        cls._initialized = False

    def close(self) -> None:
        """Close the cached connection. Does nothing if none was opened."""
        if self.__class__._client is not None:
            self.__class__._client.close()
            self.__class__._client = None

    def _aws_auth(self) -> AWS4Auth:
        session = boto3.Session()
        credentials = session.get_credentials()

        return AWS4Auth(
            credentials.access_key,
            credentials.secret_key,
            self.config.aws_region,
            self.config.aws_service,
            session_token=credentials.token,
        )

    def get_client(self) -> OpenSearch:
        """Get the OpenSearch client instance.

        AWS SigV4 signing is used when ``aws_region`` is configured (AWS
        requires SSL), HTTP basic auth when a username is configured.

        Returns:
            OpenSearch: The OpenSearch client instance.
        """
        if self.__class__._client is None:
            config = self.config
            options = {
                "hosts": [{"host": config.opensearch_host, "port": config.opensearch_port}],
                "use_ssl": config.use_ssl,
                "verify_certs": config.verify_certs,
            }

            if config.aws_region:
                options.update(
                    http_auth=self._aws_auth(),
                    use_ssl=True,
                    verify_certs=True,
                    connection_class=RequestsHttpConnection,
                )
            elif config.opensearch_username:
                options["http_auth"] = (
                    config.opensearch_username,
                    config.opensearch_password or "",
                )

            logger.info(
                f"Connecting to OpenSearch at {config.opensearch_host}:{config.opensearch_port}"
            )
            self.__class__._client = OpenSearch(**options)

        return self.__class__._client
