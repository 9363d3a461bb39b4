"""Client construction from connection properties.

This module turns a :class:`MongoProperties` store into keyword arguments for
PyMongo's ``AsyncMongoClient`` and manages the client's lifetime.
"""

import logging
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from .exceptions import ConfigurationError
from .keys import MongoProp
from .logger import OptionLogger
from .messages import get_message
from .parsing import is_empty
from .properties import MongoProperties

LOGGER = logging.getLogger(__name__)

KERBEROS_MECHANISM = "GSSAPI"
KERBEROS_SOURCE = "$external"


class MongoClientFactory:
    """Creates and owns an async MongoDB client for a property store.

    All three resolvers run before the client is created, so configuration
    errors surface from :attr:`client` without any connection attempt.

    Attributes:
        properties: The property store the client is built from.
        logger: Receives resolver diagnostics; None silences them.

    Examples:
        >>> props = (
        ...     MongoProperties.Builder()
        ...     .set(MongoProp.HOST, "db1:27017,db2:27017")
        ...     .set(MongoProp.DBNAME, "sales")
        ...     .set(MongoProp.READ_PREFERENCE, "secondaryPreferred")
        ...     .build()
        ... )
        >>> async with MongoClientFactory(props) as factory:
        ...     await factory.database["orders"].find_one()
    """

    def __init__(self, properties: MongoProperties, logger: OptionLogger | None = LOGGER):
        """Initialize the factory.

        Args:
            properties: The property store to build the client from.
            logger: Receives resolver diagnostics. Defaults to this module's
                logger; pass None to silence them.
        """
        self.properties = properties
        self.logger = logger
        self._client: AsyncMongoClient | None = None

    def client_kwargs(self) -> dict[str, Any]:
        """Resolve every property into ``AsyncMongoClient`` keyword arguments.

        A single seed connects directly unless ``USE_ALL_REPLICA_SET_MEMBERS``
        is set. With ``USE_KERBEROS`` the user authenticates over GSSAPI
        against ``$external`` and no password is sent.

        Returns:
            Keyword arguments including ``host`` as a list of ``host:port``
            strings.

        Raises:
            ConfigurationError: If a property cannot be resolved.

        Examples:
            >>> props = MongoProperties.Builder().set(MongoProp.HOST, "db1:27018").build()
            >>> kwargs = MongoClientFactory(props, logger=None).client_kwargs()
            >>> kwargs["host"], kwargs["directConnection"]
            (['db1:27018'], True)
        """
        props = self.properties
        kwargs = props.build_client_options(self.logger).to_client_kwargs()

        hosts = props.hosts(self.logger)
        kwargs["host"] = [
            f"[{host}]:{port}" if ":" in host else f"{host}:{port}" for host, port in hosts
        ]
        if len(hosts) == 1 and not props.use_all_replica_set_members():
            kwargs["directConnection"] = True

        credentials = props.credentials()
        if credentials is not None:
            if props.use_kerberos():
                kwargs["username"] = credentials.username
                kwargs["authMechanism"] = KERBEROS_MECHANISM
                kwargs["authSource"] = KERBEROS_SOURCE
            else:
                kwargs.update(credentials.to_client_kwargs())
        return kwargs

    @property
    def client(self) -> AsyncMongoClient:
        """Get or create the MongoDB async client instance.

        The client is created on first access and reused afterwards.

        Returns:
            MongoDB async client instance

        Raises:
            ConfigurationError: If a property cannot be resolved. No client
                is created in that case.
        """
        if self._client is None:
            kwargs = self.client_kwargs()
            self._client = AsyncMongoClient(**kwargs)
        return self._client

    @property
    def database(self):
        """Get the database named by ``DBNAME``.

        Returns:
            MongoDB async database instance

        Raises:
            ConfigurationError: If ``DBNAME`` is not set.

        Examples:
            >>> factory = MongoClientFactory(props)
            >>> db = factory.database
            >>> await db.list_collection_names()
        """
        name = self.properties.get(MongoProp.DBNAME)
        if is_empty(name):
            raise ConfigurationError(get_message("NoDatabaseName"))
        return self.client[name]

    async def verify_connectivity(self) -> bool:
        """Verify that the server can be reached and the user authenticated.

        Returns:
            True if the ping succeeds, False if the driver reports an error.

        Raises:
            ConfigurationError: If a property cannot be resolved.

        Examples:
            >>> if await factory.verify_connectivity():
            ...     print("Connected to MongoDB")
        """
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as err:
            LOGGER.warning("MongoDB ping failed: %s", err)
            return False

    async def close(self) -> None:
        """Close the client and all of its connections.

        Does nothing when no client was created. A later access to
        :attr:`client` creates a new one.

        Examples:
            >>> await factory.close()
        """
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def __aenter__(self) -> "MongoClientFactory":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - ensures client is closed."""
        await self.close()
        return False
