"""Resolution of authentication credentials."""

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from .keys import MongoProp
from .parsing import is_empty

if TYPE_CHECKING:
    from .properties import MongoProperties


class MongoCredentials(BaseModel):
    """Credentials for authenticating a client.

    Attributes:
        username: The user to authenticate as.
        password: The password; empty when none was configured.
        source: Database the user is defined in (``authSource``).
        mechanism: Authentication mechanism, or None for the driver default.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(default="", repr=False)
    source: str | None = None
    mechanism: str | None = None

    def to_client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``pymongo.MongoClient``."""
        kwargs: dict[str, Any] = {"username": self.username, "password": self.password}
        if self.source is not None:
            kwargs["authSource"] = self.source
        if self.mechanism is not None:
            kwargs["authMechanism"] = self.mechanism
        return kwargs


def resolve_credentials(props: "MongoProperties") -> MongoCredentials | None:
    """Build credentials, or return None when no username is configured.

    The authentication database falls back to ``DBNAME`` when
    ``AUTH_DATABASE`` is unset or empty.
    """
    username = props.get(MongoProp.USERNAME)
    if is_empty(username):
        return None

    source = props.get(MongoProp.AUTH_DATABASE)
    if is_empty(source):
        source = props.get(MongoProp.DBNAME)
    mechanism = props.get(MongoProp.AUTH_MECHA)

    return MongoCredentials(
        username=username,
        password=props.get(MongoProp.PASSWORD) or "",
        source=source,
        mechanism=None if is_empty(mechanism) else mechanism,
    )
