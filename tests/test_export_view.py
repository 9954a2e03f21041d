"""Tests for the exported notification record."""

import logging

from notiheze.domain.entities import EXPORT_KEYS


def test_mention_without_agent_or_origin(make_view, message_catalog):
    exported = make_view(
        type="mention",
        message='[[2, "Alice"], [1, "Bob"]]',
        agent_id=None,
        origin_id=None,
    ).export_view()

    assert exported["agent_url"] is None
    assert exported["origin_url"] is None
    assert exported["header_short"].key == "short-header-mention"
    assert exported["header_short"].params == ["Bob", "Alice"]
    assert exported["header_long"].key == "long-header-mention"
    assert ("short-header-mention", ["Bob", "Alice"]) in message_catalog.calls


def test_export_contains_every_key(make_view):
    exported = make_view(origin_id="metawiki", agent_id="7", read=1700000500).export_view()

    assert tuple(exported) == EXPORT_KEYS
    assert exported == {
        "icons": {"notification": "/icons/mention.svg"},
        "category": "mention",
        "id": 42,
        "type": "mention",
        "header_short": exported["header_short"],
        "header_long": exported["header_long"],
        "created_at": 1700000000,
        "read_at": 1700000500,
        "origin_url": "https://meta.example.org",
        "agent_url": "https://meta.example.org/wiki/User:Alice",
        "canonical_url": "https://meta.example.org/wiki/Talk:Main_Page",
        "importance": 5,
    }


def test_export_degrades_every_lookup(make_view, caplog):
    view = make_view(
        type="brand-new-type",
        message="not json",
        origin_id="missingwiki",
        agent_id="99",
    )

    with caplog.at_level(logging.WARNING, logger="notiheze.domain.entities.notification"):
        exported = view.export_view()

    assert set(exported) == set(EXPORT_KEYS)
    assert exported["icons"] == {"notification": None}
    assert exported["category"] is None
    assert exported["header_short"] is None
    assert exported["header_long"] is None
    assert exported["origin_url"] is None
    assert exported["agent_url"] is None
    assert exported["importance"] == 0
    assert "agent_url" in caplog.text
    assert "header_short" in caplog.text


def test_export_survives_unexpected_collaborator_errors(make_view, caplog):
    class BrokenRegistry:
        def resolve(self, origin_id):
            raise RuntimeError("registry offline")

    with caplog.at_level(logging.ERROR):
        exported = make_view(origin_id="metawiki", wiki_registry=BrokenRegistry()).export_view()

    assert exported["origin_url"] is None
    assert "origin_url" in caplog.text


def test_oversized_slot_key_yields_null_headers(make_view, message_catalog):
    exported = make_view(message='[[2, "a"], [3000000, "b"]]').export_view()

    assert exported["header_short"] is None
    assert exported["header_long"] is None
    assert message_catalog.calls == []
