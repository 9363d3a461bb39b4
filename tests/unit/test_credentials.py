"""Unit tests for credential resolution."""

import pytest
from pydantic import ValidationError

from mongoprops import MongoCredentials, MongoProp, resolve_credentials


def test_full_credentials(builder):
    """Test credentials with an explicit authentication database."""
    props = (
        builder.set(MongoProp.USERNAME, "testuser")
        .set(MongoProp.PASSWORD, "testpass")
        .set(MongoProp.AUTH_DATABASE, "testuser-auth-db")
        .set(MongoProp.DBNAME, "database")
        .build()
    )

    credentials = resolve_credentials(props)

    assert credentials == MongoCredentials(
        username="testuser", password="testpass", source="testuser-auth-db", mechanism=None
    )


def test_username_only_defaults(builder):
    """Test that password defaults to empty and source to DBNAME."""
    props = builder.set(MongoProp.USERNAME, "u").set(MongoProp.DBNAME, "d").build()

    credentials = resolve_credentials(props)

    assert credentials.username == "u"
    assert credentials.password == ""
    assert credentials.source == "d"
    assert credentials.mechanism is None


def test_password_removed_defaults_to_empty(builder):
    """Test that an absent PASSWORD yields an empty password."""
    props = builder.set(MongoProp.USERNAME, "u").set(MongoProp.PASSWORD, None).build()

    assert resolve_credentials(props).password == ""


@pytest.mark.parametrize("auth_database", ["", None])
def test_empty_or_absent_auth_database_falls_back_to_dbname(auth_database, builder):
    """Test the DBNAME fallback for the authentication source."""
    props = (
        builder.set(MongoProp.USERNAME, "testuser")
        .set(MongoProp.PASSWORD, "testpass")
        .set(MongoProp.AUTH_DATABASE, auth_database)
        .set(MongoProp.DBNAME, "database")
        .build()
    )

    assert resolve_credentials(props).source == "database"


@pytest.mark.parametrize("mechanism", ["SCRAM-SHA-1", "PLAIN"])
def test_auth_mechanism(mechanism, builder):
    """Test that a configured mechanism is carried through."""
    props = (
        builder.set(MongoProp.USERNAME, "testuser")
        .set(MongoProp.DBNAME, "database")
        .set(MongoProp.AUTH_MECHA, mechanism)
        .build()
    )

    assert resolve_credentials(props).mechanism == mechanism


def test_empty_auth_mechanism_is_none(builder):
    """Test that an empty mechanism counts as unset."""
    props = builder.set(MongoProp.USERNAME, "u").set(MongoProp.AUTH_MECHA, "").build()

    assert resolve_credentials(props).mechanism is None


@pytest.mark.parametrize("username", [None, ""])
def test_no_username_returns_none(username, builder):
    """Test that credentials require a username."""
    props = builder.set(MongoProp.USERNAME, username).set(MongoProp.DBNAME, "d").build()

    assert resolve_credentials(props) is None
    assert props.credentials() is None


def test_no_source_at_all(builder):
    """Test credentials when neither database key is set."""
    credentials = resolve_credentials(builder.set(MongoProp.USERNAME, "u").build())

    assert credentials.source is None
    assert "authSource" not in credentials.to_client_kwargs()


def test_to_client_kwargs():
    """Test the driver keyword arguments."""
    credentials = MongoCredentials(
        username="u", password="p", source="admin", mechanism="SCRAM-SHA-256"
    )

    assert credentials.to_client_kwargs() == {
        "username": "u",
        "password": "p",
        "authSource": "admin",
        "authMechanism": "SCRAM-SHA-256",
    }


def test_repr_hides_password():
    """Test that the password is left out of the repr."""
    credentials = MongoCredentials(username="u", password="hunter2", source="admin")

    assert "hunter2" not in repr(credentials)


def test_credentials_are_frozen():
    """Test that resolved credentials cannot be modified."""
    credentials = MongoCredentials(username="u")

    with pytest.raises(ValidationError):
        credentials.username = "other"
