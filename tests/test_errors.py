"""
Tests for tpath/errors.py

Tests exception classes and their formatting.
"""

from __future__ import annotations

from tpath import (
    ConfigLoadError,
    CyclicAliasError,
    EmptyFromForImplicitNamespaceError,
    MissingNamespaceSeparatorError,
    NamespaceNotFoundError,
    ResolverError,
    TPathUserError,
)


class TestResolverErrors:

    def test_hierarchy(self):
        for err in (
            MissingNamespaceSeparatorError("x"),
            EmptyFromForImplicitNamespaceError("::x"),
            NamespaceNotFoundError("ns"),
            CyclicAliasError("x", "t", 1000),
        ):
            assert isinstance(err, ResolverError)
            assert isinstance(err, TPathUserError)

    def test_missing_separator_message(self):
        assert "'::'" in str(MissingNamespaceSeparatorError("pages/about"))

    def test_empty_from_message(self):
        assert "::x" in str(EmptyFromForImplicitNamespaceError("::x"))

    def test_namespace_not_found_lists_available(self):
        msg = str(NamespaceNotFoundError("mails", path="mails::x", available=["a", "b"]))
        assert "Namespace 'mails' not found" in msg
        assert "mails::x" in msg
        assert "a, b" in msg

    def test_namespace_not_found_minimal(self):
        assert str(NamespaceNotFoundError("mails")) == "Namespace 'mails' not found"

    def test_cyclic_alias_message(self):
        msg = str(CyclicAliasError("x", "theme", 1000))
        assert "Infinite loop" in msg
        assert "'theme'" in msg
        assert "1000" in msg


class TestConfigLoadError:

    def test_field_path_prefix(self):
        err = ConfigLoadError("bad value", ("aliases", "theme"), "tpath.yaml")
        assert str(err) == "aliases.theme: bad value (tpath.yaml)"
        assert err.path == ("aliases", "theme")

    def test_plain_message(self):
        assert str(ConfigLoadError("oops")) == "oops"
        assert isinstance(ConfigLoadError("oops"), TPathUserError)
