"""The closed set of recognised connection property keys."""

from enum import Enum

from .exceptions import ConfigurationError
from .messages import get_message


class MongoProp(Enum):
    """Recognised property keys.

    The member value is the key's external spelling, as written in existing
    configuration files and forms. Those spellings must not change.
    """

    HOST = "HOST"
    PORT = "PORT"
    DBNAME = "DBNAME"
    USERNAME = "USERNAME"
    PASSWORD = "PASSWORD"
    AUTH_DATABASE = "AUTH_DATABASE"
    AUTH_MECHA = "AUTH_MECHA"
    USE_KERBEROS = "USE_KERBEROS"
    USE_ALL_REPLICA_SET_MEMBERS = "USE_ALL_REPLICA_SET_MEMBERS"

    # Client options
    CONNECTIONS_PER_HOST = "connectionsPerHost"
    CONNECT_TIMEOUT = "connectTimeout"
    MAX_WAIT_TIME = "maxWaitTime"
    SOCKET_TIMEOUT = "socketTimeout"
    USE_SSL = "useSSL"
    CURSOR_FINALIZER_ENABLED = "cursorFinalizerEnabled"

    # Read preference
    READ_PREFERENCE = "readPreference"
    TAG_SET = "tagSet"

    # Write concern
    WRITE_CONCERN = "writeConcern"
    W_TIMEOUT = "wTimeout"
    JOURNALED = "JOURNALED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: "str | MongoProp") -> "MongoProp":
        """Resolve an external spelling or member name to a key.

        Raises:
            ConfigurationError: If ``name`` is not a recognised key.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[name]
        except KeyError:
            raise ConfigurationError(
                get_message("UnknownProperty", name, [prop.value for prop in cls])
            ) from None
