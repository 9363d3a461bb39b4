"""Immutable, ordered store of connection property values."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pymongo.write_concern import WriteConcern

from .credentials import MongoCredentials, resolve_credentials
from .keys import MongoProp
from .logger import OptionLogger
from .options import MongoClientOptions, build_client_options
from .parsing import bool_value, int_value, is_empty
from .read_preference import ReadPreferenceMode, resolve_read_preference
from .write_concern import resolve_write_concern

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 27017


class MongoProperties:
    """A frozen set of property values keyed by :class:`MongoProp`.

    Instances are created through :class:`MongoProperties.Builder` and never
    change afterwards, so resolvers may read them from any thread.

    Examples:
        >>> props = (
        ...     MongoProperties.Builder()
        ...     .set(MongoProp.DBNAME, "sales")
        ...     .set(MongoProp.READ_PREFERENCE, "nearest")
        ...     .build()
        ... )
        >>> props.get(MongoProp.DBNAME)
        'sales'
        >>> print(props)  # doctest: +NORMALIZE_WHITESPACE
        MongoProperties:
        DBNAME=sales
        HOST=localhost
        PASSWORD=
        readPreference=nearest
    """

    class Builder:
        """Accumulates property values before freezing them.

        The builder is seeded with ``HOST=localhost`` and ``PASSWORD=""``.
        """

        def __init__(self) -> None:
            self._props: dict[MongoProp, str] = {
                MongoProp.HOST: DEFAULT_HOST,
                MongoProp.PASSWORD: "",
            }

        def set(self, key: "MongoProp | str", value: str | None) -> "MongoProperties.Builder":
            """Set ``key`` to ``value``.

            Args:
                key: A :class:`MongoProp` or its external spelling.
                value: The raw string value. None removes the key, so the
                    property becomes absent rather than empty.

            Returns:
                This builder, for chaining.

            Raises:
                ConfigurationError: If ``key`` is not a recognised property.

            Examples:
                >>> builder = MongoProperties.Builder()
                >>> builder = builder.set("readPreference", "nearest").set(MongoProp.TAG_SET, None)
            """
            prop = MongoProp.from_name(key)
            if value is None:
                self._props.pop(prop, None)
            else:
                self._props[prop] = value
            return self

        def build(self) -> "MongoProperties":
            """Freeze the current values into a :class:`MongoProperties`.

            Later calls to :meth:`set` do not affect stores already built.

            Returns:
                An immutable property store.
            """
            return MongoProperties(dict(self._props))

    def __init__(self, props: Mapping[MongoProp, str]):
        """Initialize the store.

        Prefer :class:`MongoProperties.Builder`, which applies the seeded
        defaults.

        Args:
            props: Values keyed by property; the mapping is copied.
        """
        self._props = MappingProxyType(dict(props))

    @classmethod
    def from_mapping(cls, values: Mapping[str, str | None]) -> "MongoProperties":
        """Build a store from a mapping keyed by external spellings.

        Args:
            values: Raw values keyed by spelling or member name. None
                values leave the key absent.

        Returns:
            A store that also carries the builder's seeded defaults.

        Raises:
            ConfigurationError: If a key is not a recognised property.

        Examples:
            >>> props = MongoProperties.from_mapping({"DBNAME": "sales", "wTimeout": "500"})
            >>> props.get(MongoProp.W_TIMEOUT)
            '500'
        """
        builder = cls.Builder()
        for key, value in values.items():
            builder.set(key, value)
        return builder.build()

    def get(self, key: MongoProp, default: str | None = None) -> str | None:
        """Get the raw value of ``key``.

        Args:
            key: The property to look up.
            default: Returned when the property is absent.

        Returns:
            The stored string, which may be empty, or ``default``.

        Examples:
            >>> props = MongoProperties.Builder().build()
            >>> props.get(MongoProp.HOST)
            'localhost'
            >>> props.get(MongoProp.DBNAME) is None
            True
        """
        return self._props.get(key, default)

    def keys(self) -> Iterator[MongoProp]:
        """Iterate over the properties present, in insertion order."""
        return iter(self._props)

    def __contains__(self, key: object) -> bool:
        return key in self._props

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MongoProperties):
            return NotImplemented
        return dict(self._props) == dict(other._props)

    def __hash__(self) -> int:
        return hash(frozenset(self._props.items()))

    def __repr__(self) -> str:
        return f"MongoProperties({len(self._props)} properties)"

    def __str__(self) -> str:
        lines = ["MongoProperties:\n"]
        for prop in sorted(self._props, key=lambda p: p.value.lower()):
            value = self._props[prop]
            if prop is MongoProp.PASSWORD:
                value = "*" * len(value)
            lines.append(f"{prop.value}={value}\n")
        return "".join(lines)

    def hosts(self, logger: OptionLogger | None = None) -> list[tuple[str, int]]:
        """Return the ``(host, port)`` seed list from ``HOST`` and ``PORT``.

        ``HOST`` may hold a comma-separated replica-set list such as
        ``"db1:27017,db2"``; entries without a port use ``PORT``. IPv6
        literals are written in brackets.

        Args:
            logger: Receives a warning for each malformed port.

        Returns:
            One pair per seed, never empty.

        Examples:
            >>> props = MongoProperties.Builder().set(MongoProp.HOST, "db1:27018,db2").build()
            >>> props.hosts()
            [('db1', 27018), ('db2', 27017)]
        """
        default_port = int_value(self.get(MongoProp.PORT), DEFAULT_PORT, logger)
        hosts = []
        for entry in (self.get(MongoProp.HOST) or DEFAULT_HOST).split(","):
            entry = entry.strip()
            if not entry:
                continue
            if entry.startswith("["):
                # bracketed IPv6 literal
                host, _, rest = entry[1:].partition("]")
                port = rest[1:]
            else:
                host, _, port = entry.partition(":")
            hosts.append((host, int_value(port, default_port, logger)))
        return hosts or [(DEFAULT_HOST, default_port)]

    def use_kerberos(self) -> bool:
        """Whether ``USE_KERBEROS`` is "true", ignoring case."""
        return bool_value(self.get(MongoProp.USE_KERBEROS), False)

    def use_all_replica_set_members(self) -> bool:
        """Whether ``USE_ALL_REPLICA_SET_MEMBERS`` is "true", ignoring case."""
        return bool_value(self.get(MongoProp.USE_ALL_REPLICA_SET_MEMBERS), False)

    def has_credentials(self) -> bool:
        """Whether a non-empty ``USERNAME`` is configured."""
        return not is_empty(self.get(MongoProp.USERNAME))

    def read_preference(self, logger: OptionLogger | None = None) -> ReadPreferenceMode | None:
        """Resolve the read preference.

        Args:
            logger: Receives the resolver's diagnostics; None silences them.

        Returns:
            The read preference, or None when no name is configured.

        Raises:
            ConfigurationError: On malformed tag sets or an unknown name.
        """
        return resolve_read_preference(self, logger)

    def write_concern(self, logger: OptionLogger | None = None) -> WriteConcern:
        """Resolve the write concern.

        Args:
            logger: Receives the resolver's diagnostics; None silences them.

        Returns:
            The write concern; never None.

        Raises:
            ConfigurationError: On a malformed ``wTimeout`` or values the
                driver rejects.
        """
        return resolve_write_concern(self, logger)

    def credentials(self) -> MongoCredentials | None:
        """Resolve credentials, or None when no username is configured."""
        return resolve_credentials(self)

    def build_client_options(self, logger: OptionLogger | None = None) -> MongoClientOptions:
        """Resolve every client option.

        Args:
            logger: Receives warnings for values that fell back to defaults.

        Returns:
            Pool, timeout, TLS, read and write settings.

        Raises:
            ConfigurationError: If the read preference or write concern
                cannot be resolved.
        """
        return build_client_options(self, logger)
