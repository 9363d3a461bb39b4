"""Resolution of the read preference and its tag sets."""

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from bson import json_util
from bson.errors import BSONError
from pymongo.read_preferences import (
    Nearest,
    Primary,
    PrimaryPreferred,
    Secondary,
    SecondaryPreferred,
)

from .exceptions import ConfigurationError
from .keys import MongoProp
from .logger import OptionLogger, ensure_logger
from .messages import get_message
from .parsing import is_empty

if TYPE_CHECKING:
    from .properties import MongoProperties

ReadPreferenceMode = Primary | PrimaryPreferred | Secondary | SecondaryPreferred | Nearest
TagSet = dict[str, Any]


class NamedReadPreference(Enum):
    """Registry of the read preferences a configuration may name."""

    PRIMARY = ("primary", Primary)
    PRIMARY_PREFERRED = ("primaryPreferred", PrimaryPreferred)
    SECONDARY = ("secondary", Secondary)
    SECONDARY_PREFERRED = ("secondaryPreferred", SecondaryPreferred)
    NEAREST = ("nearest", Nearest)

    def __init__(self, preference_name: str, mode: type[ReadPreferenceMode]):
        self.preference_name = preference_name
        self.mode = mode

    @classmethod
    def by_name(cls, name: str) -> "NamedReadPreference | None":
        """Look up a preference by name, ignoring case."""
        for preference in cls:
            if preference.preference_name.lower() == name.lower():
                return preference
        return None

    @classmethod
    def preference_names(cls) -> list[str]:
        return [preference.preference_name for preference in cls]

    def get_preference(self) -> ReadPreferenceMode:
        return self.mode()

    def get_taggable_preference(
        self, first: TagSet, remainder: list[TagSet]
    ) -> ReadPreferenceMode:
        """Build the preference constrained by ``first`` then ``remainder``.

        Raises:
            ConfigurationError: For ``primary``, which cannot carry tag sets.
        """
        if self is NamedReadPreference.PRIMARY:
            raise ConfigurationError(get_message("PrimaryReadPrefWithTagSets"))
        return self.mode(tag_sets=[first, *remainder])


def get_tag_sets(props: "MongoProperties") -> list[TagSet]:
    """Parse the ``tagSet`` property into an ordered list of documents.

    A single document such as ``{"dc": "east"}`` is accepted as well as an
    array of documents. Extended JSON is understood.

    Raises:
        ConfigurationError: If the value is not valid JSON, holds an
            invalid extended JSON value, or an element is not a document.
    """
    tag_set = props.get(MongoProp.TAG_SET)
    if tag_set is None:
        return []
    if not tag_set.strip().startswith("["):
        tag_set = f"[{tag_set}]"
    try:
        parsed = json_util.loads(tag_set)
    except (ValueError, TypeError, RecursionError, BSONError) as err:
        raise ConfigurationError(str(err)) from err

    tag_sets = []
    for element in parsed:
        if not isinstance(element, Mapping):
            raise ConfigurationError(get_message("TagSetNotADocument", element))
        tag_sets.append(dict(element))
    return tag_sets


def resolve_read_preference(
    props: "MongoProperties", logger: OptionLogger | None = None
) -> ReadPreferenceMode | None:
    """Resolve the configured read preference.

    Returns None when no preference name is configured, leaving the choice
    to the driver. Tag sets are ignored, with a warning, for ``primary``.

    Raises:
        ConfigurationError: On malformed tag-set JSON or an unknown
            preference name.
    """
    log = ensure_logger(logger)
    name = props.get(MongoProp.READ_PREFERENCE)
    if is_empty(name):
        return None

    tag_sets = get_tag_sets(props)

    preference = NamedReadPreference.by_name(name)
    if preference is None:
        valid = "[" + ", ".join(NamedReadPreference.preference_names()) + "]"
        raise ConfigurationError(get_message("ReadPreferenceNotFound", name, valid))
    log.info(get_message("UsingReadPreference", preference.preference_name))

    if preference is NamedReadPreference.PRIMARY and tag_sets:
        log.warning(get_message("PrimaryReadPrefWithTagSets"))
        return preference.get_preference()
    if tag_sets:
        log.info(get_message("UsingReadPreferenceTagSets", json_util.dumps(tag_sets)))
        return preference.get_taggable_preference(tag_sets[0], tag_sets[1:])
    log.info(get_message("NoReadPreferenceTagSetsDefined"))
    return preference.get_preference()
