"""Translation of connection properties into MongoDB client options.

A flat set of named string properties is parsed, defaulted and combined
into the read preference, write concern, credentials and pool/timeout
settings a PyMongo client needs.

Usage:
    >>> from mongoprops import MongoProp, MongoProperties
    >>>
    >>> props = (
    ...     MongoProperties.Builder()
    ...     .set(MongoProp.DBNAME, "sales")
    ...     .set(MongoProp.USERNAME, "reporter")
    ...     .set(MongoProp.READ_PREFERENCE, "secondary")
    ...     .set(MongoProp.TAG_SET, '{"dc": "east"}')
    ...     .set(MongoProp.WRITE_CONCERN, "majority")
    ...     .set(MongoProp.W_TIMEOUT, "500")
    ...     .build()
    ... )
    >>> props.read_preference().tag_sets
    [{'dc': 'east'}]
    >>> props.write_concern()
    WriteConcern(w=majority, wtimeout=500, j=False)
    >>> props.credentials().source
    'sales'
"""

from .config import MongoSettings
from .connection import MongoClientFactory
from .credentials import MongoCredentials, resolve_credentials
from .exceptions import ConfigurationError
from .keys import MongoProp
from .logger import OptionLogger
from .options import MongoClientOptions, build_client_options
from .parsing import bool_value, int_value, long_value
from .properties import MongoProperties
from .read_preference import NamedReadPreference, get_tag_sets, resolve_read_preference
from .write_concern import resolve_write_concern

__all__ = [
    # Property store
    "MongoProp",
    "MongoProperties",
    "MongoSettings",
    # Resolvers
    "resolve_read_preference",
    "resolve_write_concern",
    "resolve_credentials",
    "build_client_options",
    "get_tag_sets",
    "NamedReadPreference",
    # Results
    "MongoClientOptions",
    "MongoCredentials",
    # Scalar parsers
    "int_value",
    "long_value",
    "bool_value",
    # Collaborators
    "MongoClientFactory",
    "OptionLogger",
    "ConfigurationError",
]
