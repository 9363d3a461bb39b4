"""Unit tests for MongoProp and MongoProperties."""

import pytest

from mongoprops import ConfigurationError, MongoProp, MongoProperties


def test_from_name_accepts_spelling_member_name_and_member():
    """Test that keys resolve from every accepted form."""
    assert MongoProp.from_name("connectionsPerHost") is MongoProp.CONNECTIONS_PER_HOST
    assert MongoProp.from_name("CONNECTIONS_PER_HOST") is MongoProp.CONNECTIONS_PER_HOST
    assert MongoProp.from_name(MongoProp.USE_SSL) is MongoProp.USE_SSL


def test_from_name_unknown_key():
    """Test that unknown keys are rejected."""
    with pytest.raises(ConfigurationError, match="Unknown property 'readPrefrence'"):
        MongoProp.from_name("readPrefrence")


def test_prop_str_is_external_spelling():
    """Test that a key renders as its external spelling."""
    assert str(MongoProp.USE_SSL) == "useSSL"
    assert str(MongoProp.AUTH_DATABASE) == "AUTH_DATABASE"


def test_builder_seeds_host_and_password():
    """Test the builder's seeded entries."""
    props = MongoProperties.Builder().build()

    assert props.get(MongoProp.HOST) == "localhost"
    assert props.get(MongoProp.PASSWORD) == ""
    assert props.get(MongoProp.DBNAME) is None
    assert props.get(MongoProp.DBNAME, "fallback") == "fallback"
    assert list(props.keys()) == [MongoProp.HOST, MongoProp.PASSWORD]


def test_str_renders_sorted_entries():
    """Test the diagnostic rendering of a populated store."""
    props = (
        MongoProperties.Builder()
        .set(MongoProp.CONNECTIONS_PER_HOST, "127")
        .set(MongoProp.CONNECT_TIMEOUT, "333")
        .set(MongoProp.MAX_WAIT_TIME, "12345")
        .set(MongoProp.CURSOR_FINALIZER_ENABLED, "false")
        .set(MongoProp.SOCKET_TIMEOUT, "4")
        .set(MongoProp.USE_SSL, "true")
        .set(MongoProp.READ_PREFERENCE, "primary")
        .set(MongoProp.USE_KERBEROS, "false")
        .set(MongoProp.USE_ALL_REPLICA_SET_MEMBERS, "false")
        .build()
    )

    assert str(props) == (
        "MongoProperties:\n"
        "connectionsPerHost=127\n"
        "connectTimeout=333\n"
        "cursorFinalizerEnabled=false\n"
        "HOST=localhost\n"
        "maxWaitTime=12345\n"
        "PASSWORD=\n"
        "readPreference=primary\n"
        "socketTimeout=4\n"
        "USE_ALL_REPLICA_SET_MEMBERS=false\n"
        "USE_KERBEROS=false\n"
        "useSSL=true\n"
    )


def test_str_is_stable_and_independent_of_insertion_order():
    """Test that rendering is idempotent and order-independent."""
    first = MongoProperties.Builder().set("wTimeout", "5").set("DBNAME", "d").build()
    second = MongoProperties.Builder().set("DBNAME", "d").set("wTimeout", "5").build()

    assert str(first) == str(first)
    assert str(first) == str(second)
    assert first == second


def test_str_masks_password():
    """Test that a password is never rendered in clear text."""
    props = MongoProperties.Builder().set(MongoProp.PASSWORD, "secret").build()

    assert "PASSWORD=******\n" in str(props)
    assert "secret" not in str(props)


def test_set_none_removes_entry(builder):
    """Test that setting None makes a key absent."""
    props = builder.set(MongoProp.HOST, None).build()

    assert MongoProp.HOST not in props
    assert props.get(MongoProp.HOST) is None


def test_empty_is_distinct_from_absent(builder):
    """Test that an empty value is stored."""
    props = builder.set(MongoProp.AUTH_DATABASE, "").build()

    assert MongoProp.AUTH_DATABASE in props
    assert props.get(MongoProp.AUTH_DATABASE) == ""


def test_set_unknown_key_raises(builder):
    """Test that unknown keys are never stored."""
    with pytest.raises(ConfigurationError):
        builder.set("dbName", "x")


def test_built_store_is_unaffected_by_builder_reuse(builder):
    """Test that build() freezes a snapshot."""
    builder.set(MongoProp.DBNAME, "first")
    props = builder.build()
    builder.set(MongoProp.DBNAME, "second")

    assert props.get(MongoProp.DBNAME) == "first"
    assert builder.build().get(MongoProp.DBNAME) == "second"


def test_from_mapping():
    """Test building a store from external spellings."""
    props = MongoProperties.from_mapping({"DBNAME": "sales", "readPreference": "nearest"})

    assert props.get(MongoProp.DBNAME) == "sales"
    assert props.get(MongoProp.READ_PREFERENCE) == "nearest"
    assert props.get(MongoProp.HOST) == "localhost"


def test_from_mapping_unknown_key():
    """Test that a mapping with an unknown key is rejected."""
    with pytest.raises(ConfigurationError):
        MongoProperties.from_mapping({"HOSTS": "a"})


def test_hosts_default(builder):
    """Test the default seed list."""
    assert builder.build().hosts() == [("localhost", 27017)]


def test_hosts_replica_set_list(builder, logger):
    """Test a comma-separated seed list with a PORT fallback."""
    props = builder.set(MongoProp.HOST, "db1:27018, db2").set(MongoProp.PORT, "27019").build()

    assert props.hosts(logger) == [("db1", 27018), ("db2", 27019)]
    logger.warning.assert_not_called()


def test_hosts_malformed_port_falls_back(builder, logger):
    """Test that a malformed port uses the default port with a warning."""
    props = builder.set(MongoProp.HOST, "db1:abc").build()

    assert props.hosts(logger) == [("db1", 27017)]
    logger.warning.assert_called_once()


def test_hosts_ipv6_literal(builder):
    """Test bracketed IPv6 addresses."""
    props = builder.set(MongoProp.HOST, "[::1]:27020,[fe80::1]").build()

    assert props.hosts() == [("::1", 27020), ("fe80::1", 27017)]


def test_boolean_accessors(builder):
    """Test the Kerberos and replica-set flags."""
    assert not builder.build().use_kerberos()
    assert not builder.build().use_all_replica_set_members()

    props = (
        builder.set(MongoProp.USE_KERBEROS, "TRUE")
        .set(MongoProp.USE_ALL_REPLICA_SET_MEMBERS, "true")
        .build()
    )
    assert props.use_kerberos()
    assert props.use_all_replica_set_members()


def test_has_credentials(builder):
    """Test that credentials require a username."""
    assert not builder.build().has_credentials()
    assert builder.set(MongoProp.USERNAME, "u").build().has_credentials()
