"""Resolution of the write concern."""

from typing import TYPE_CHECKING

from pymongo.errors import ConfigurationError as DriverConfigurationError
from pymongo.write_concern import WriteConcern

from .exceptions import ConfigurationError
from .keys import MongoProp
from .logger import OptionLogger, ensure_logger
from .messages import get_message
from .parsing import bool_value, is_empty, parse_integer

if TYPE_CHECKING:
    from .properties import MongoProperties

DEFAULT_W = 1


def _build(w: int | str, wtimeout: int, journaled: bool) -> WriteConcern:
    try:
        return WriteConcern(w=w, wtimeout=wtimeout, j=journaled)
    except (ValueError, DriverConfigurationError) as err:
        raise ConfigurationError(get_message("InvalidWriteConcern", err)) from err


def describe(concern: WriteConcern) -> str:
    """Render ``concern`` as ``w = .., wTimeout = .., journaled = ..``."""
    document = concern.document
    return (
        f"w = {document.get('w')}, wTimeout = {document.get('wtimeout')}, "
        f"journaled = {document.get('j')}"
    )


def resolve_write_concern(
    props: "MongoProperties", logger: OptionLogger | None = None
) -> WriteConcern:
    """Resolve the write concern from ``writeConcern``, ``wTimeout`` and ``JOURNALED``.

    A level given with neither a timeout nor journaling yields the default
    concern (w=1, no timeout, no journaling) and the level is not parsed.
    Existing configurations depend on that precedence.

    A numeric level becomes an acknowledgement count; anything else is
    passed through as a named level such as ``"majority"`` or a custom
    tag-set label. A missing level means w=1.

    Raises:
        ConfigurationError: If ``wTimeout`` is not an integer or the driver
            rejects the combination.
    """
    log = ensure_logger(logger)
    level = props.get(MongoProp.WRITE_CONCERN)
    w_timeout = props.get(MongoProp.W_TIMEOUT)
    journaled = bool_value(props.get(MongoProp.JOURNALED), False)

    if not is_empty(level) and is_empty(w_timeout) and not journaled:
        log.info(get_message("ConfiguringWithDefaultWriteConcern"))
        return _build(DEFAULT_W, 0, False)

    timeout = 0
    if not is_empty(w_timeout):
        try:
            timeout = parse_integer(w_timeout)
        except ValueError as err:
            raise ConfigurationError(
                get_message("MalformedWriteConcernTimeout", w_timeout, err)
            ) from err

    if is_empty(level):
        concern = _build(DEFAULT_W, timeout, journaled)
    else:
        try:
            w: int | str = parse_integer(level)
        except ValueError:
            w = level
        concern = _build(w, timeout, journaled)

    log.info(get_message("ConfiguringWithWriteConcern", describe(concern)))
    return concern
