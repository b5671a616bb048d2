"""
Tests for Filter: conditions, scope and scope precedence.
"""

from crudmount.repositories.filter import Filter


def test_empty_filter():
    f = Filter()
    assert len(f) == 0
    assert f.as_dict() == {}


def test_where_returns_new_filter():
    base = Filter({"name": "Acme"})
    narrowed = base.where(email="a@acme.io")

    assert base.as_dict() == {"name": "Acme"}
    assert narrowed.as_dict() == {"name": "Acme", "email": "a@acme.io"}


def test_scope_drops_matching_condition():
    f = Filter({"org_uuid": "other", "name": "x"}, scope={"org_uuid": "mine"})

    assert f.conditions == {"name": "x"}
    assert f["org_uuid"] == "mine"


def test_where_cannot_override_scope():
    f = Filter().scoped(org_uuid="mine").where(org_uuid="other")

    assert f["org_uuid"] == "mine"
    assert "org_uuid" not in f.conditions


def test_scoped_after_where_replaces_condition():
    f = Filter({"org_uuid": "other"}).scoped(org_uuid="mine")

    assert f.as_dict() == {"org_uuid": "mine"}
    assert len(f) == 1


def test_equality_and_contains():
    a = Filter({"uuid": "1"}, scope={"org_uuid": "2"})
    b = Filter().where(uuid="1").scoped(org_uuid="2")

    assert a == b
    assert "uuid" in a
    assert "org_uuid" in a
    assert "name" not in a
    assert dict(a.items()) == {"uuid": "1", "org_uuid": "2"}
