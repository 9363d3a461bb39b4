"""Connection properties from the environment using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .keys import MongoProp
from .properties import MongoProperties


class MongoSettings(BaseSettings):
    """Raw connection property values read from the environment.

    Each field holds the unparsed string for one :class:`MongoProp`; the
    field name is the lower-cased member name. Parsing and validation happen
    in the resolvers, so every field is an optional string. For example:
    - MONGOPROPS_HOST=db1:27017,db2:27017
    - MONGOPROPS_READ_PREFERENCE=secondaryPreferred
    - MONGOPROPS_TAG_SET={"dc": "east"}

    Example:
        >>> settings = MongoSettings()
        >>> props = settings.to_properties()
        >>> options = props.build_client_options()
    """

    host: str | None = None
    port: str | None = None
    dbname: str | None = None
    username: str | None = None
    password: str | None = None
    auth_database: str | None = None
    auth_mecha: str | None = None
    use_kerberos: str | None = None
    use_all_replica_set_members: str | None = None

    connections_per_host: str | None = None
    connect_timeout: str | None = None
    max_wait_time: str | None = None
    socket_timeout: str | None = None
    use_ssl: str | None = None
    cursor_finalizer_enabled: str | None = None

    read_preference: str | None = None
    tag_set: str | None = None

    write_concern: str | None = None
    w_timeout: str | None = None
    journaled: str | None = None

    model_config = SettingsConfigDict(env_prefix="MONGOPROPS_")

    def to_properties(self) -> MongoProperties:
        """Build a property store from the fields that were supplied."""
        builder = MongoProperties.Builder()
        for prop in MongoProp:
            value = getattr(self, prop.name.lower())
            if value is not None:
                builder.set(prop, value)
        return builder.build()
