"""Diagnostic message templates.

Templates use ``str.format`` positional placeholders and are looked up by
key so that the wording lives in one place.
"""

_MESSAGES: dict[str, str] = {
    "NoDatabaseName": "No database name configured (DBNAME)",
    "NumberFormat": "Unable to parse '{0}' as a number, using default value {1}",
    "UnknownProperty": "Unknown property '{0}'. Valid properties are {1}",
    "ReadPreferenceNotFound": (
        "Read preference '{0}' not found. Valid read preferences are {1}"
    ),
    "UsingReadPreference": "Using read preference: {0}",
    "PrimaryReadPrefWithTagSets": (
        "Tag sets are not applicable to the primary read preference "
        "and will be ignored"
    ),
    "UsingReadPreferenceTagSets": "Using read preference tag sets: {0}",
    "NoReadPreferenceTagSetsDefined": "No read preference tag sets defined",
    "TagSetNotADocument": "Tag set {0} is not a document",
    "MalformedWriteConcernTimeout": "Unable to parse wTimeout value '{0}': {1}",
    "InvalidWriteConcern": "Invalid write concern: {0}",
    "ConfiguringWithDefaultWriteConcern": (
        "Configuring connection with default write concern "
        "(w = 1, wTimeout = 0, journaled = False)"
    ),
    "ConfiguringWithWriteConcern": "Configuring connection with write concern ({0})",
}


def get_message(key: str, *args: object) -> str:
    """Render the template registered under ``key`` with ``args``.

    Raises:
        KeyError: If no template is registered under ``key``.
    """
    return _MESSAGES[key].format(*args)
