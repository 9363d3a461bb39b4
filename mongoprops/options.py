"""Client options assembled from connection properties."""

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pymongo.write_concern import WriteConcern

from .keys import MongoProp
from .logger import OptionLogger, ensure_logger
from .messages import get_message
from .parsing import bool_value, int_value, long_value
from .read_preference import ReadPreferenceMode, resolve_read_preference
from .write_concern import resolve_write_concern

if TYPE_CHECKING:
    from .properties import MongoProperties

DEFAULT_CONNECTIONS_PER_HOST = 100
DEFAULT_CONNECT_TIMEOUT_MS = 10000
DEFAULT_MAX_WAIT_TIME_MS = 120000
DEFAULT_SOCKET_TIMEOUT_MS = 0


class MongoClientOptions(BaseModel):
    """Pool, timeout, TLS, read and write settings for a client.

    Attributes:
        connections_per_host: Maximum pooled connections per server; at
            least 1, since pymongo reads 0 as unlimited.
        connect_timeout: Connection timeout in milliseconds; 0 means none.
        max_wait_time: Longest wait for a pooled connection in milliseconds;
            at least 1, since pymongo cannot express "do not wait".
        socket_timeout: Socket read timeout in milliseconds; 0 means none.
        use_ssl: Whether to connect over TLS.
        cursor_finalizer_enabled: Whether abandoned cursors are cleaned up.
            Recorded for compatibility; pymongo always cleans them up.
        read_preference: Resolved read preference, None for the driver default.
        write_concern: Resolved write concern.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    connections_per_host: int = Field(default=DEFAULT_CONNECTIONS_PER_HOST, ge=1)
    connect_timeout: int = Field(default=DEFAULT_CONNECT_TIMEOUT_MS, ge=0)
    max_wait_time: int = Field(default=DEFAULT_MAX_WAIT_TIME_MS, ge=1)
    socket_timeout: int = Field(default=DEFAULT_SOCKET_TIMEOUT_MS, ge=0)
    use_ssl: bool = False
    cursor_finalizer_enabled: bool = True
    read_preference: ReadPreferenceMode | None = None
    write_concern: WriteConcern = Field(default_factory=lambda: WriteConcern(w=1))

    def to_client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``pymongo.MongoClient``.

        Zero connect and socket timeouts are passed as None, which pymongo
        treats as unlimited.
        """
        kwargs: dict[str, Any] = {
            "maxPoolSize": self.connections_per_host,
            "connectTimeoutMS": self.connect_timeout or None,
            "waitQueueTimeoutMS": self.max_wait_time,
            "socketTimeoutMS": self.socket_timeout or None,
            "tls": self.use_ssl,
        }
        if self.read_preference is not None:
            kwargs["read_preference"] = self.read_preference

        document = self.write_concern.document
        if "w" in document:
            kwargs["w"] = document["w"]
        if "wtimeout" in document:
            kwargs["wTimeoutMS"] = document["wtimeout"]
        if "j" in document:
            kwargs["journal"] = document["j"]
        return kwargs


def _in_range(
    props: "MongoProperties",
    key: MongoProp,
    default: int,
    log: OptionLogger,
    parse=int_value,
    minimum: int = 0,
) -> int:
    value = parse(props.get(key), default, log)
    if value < minimum:
        log.warning(get_message("NumberFormat", props.get(key), default))
        return default
    return value


def build_client_options(
    props: "MongoProperties", logger: OptionLogger | None = None
) -> MongoClientOptions:
    """Translate ``props`` into :class:`MongoClientOptions`.

    Malformed or out-of-range numbers fall back to their defaults with a
    warning. Pool size and wait time must be positive; timeouts may be 0.

    Raises:
        ConfigurationError: If the read preference or write concern cannot
            be resolved.
    """
    log = ensure_logger(logger)
    return MongoClientOptions(
        connections_per_host=_in_range(
            props, MongoProp.CONNECTIONS_PER_HOST, DEFAULT_CONNECTIONS_PER_HOST, log, minimum=1
        ),
        connect_timeout=_in_range(
            props, MongoProp.CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT_MS, log
        ),
        max_wait_time=_in_range(
            props,
            MongoProp.MAX_WAIT_TIME,
            DEFAULT_MAX_WAIT_TIME_MS,
            log,
            parse=long_value,
            minimum=1,
        ),
        socket_timeout=_in_range(
            props, MongoProp.SOCKET_TIMEOUT, DEFAULT_SOCKET_TIMEOUT_MS, log
        ),
        use_ssl=bool_value(props.get(MongoProp.USE_SSL), False),
        cursor_finalizer_enabled=bool_value(
            props.get(MongoProp.CURSOR_FINALIZER_ENABLED), True
        ),
        read_preference=resolve_read_preference(props, log),
        write_concern=resolve_write_concern(props, log),
    )
