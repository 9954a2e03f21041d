"""Tests for the export use cases."""

from notiheze.application.use_cases import (
    NotificationCollaborators,
    build_notification_view,
    export_notifications,
)


def _collaborators(user_directory, wiki_registry, message_catalog, config_store, categorizer):
    return NotificationCollaborators(
        user_directory=user_directory,
        wiki_registry=wiki_registry,
        message_catalog=message_catalog,
        config=config_store,
        categorizer=categorizer,
    )


def test_build_view_ignores_unknown_fields(
    user_directory, wiki_registry, message_catalog, config_store, categorizer
):
    view = build_notification_view(
        {
            "id": 3,
            "type": "mention",
            "message": "[]",
            "canonical_url": "https://meta.example.org/wiki/Main_Page",
            "recipient": 12,
        },
        _collaborators(user_directory, wiki_registry, message_catalog, config_store, categorizer),
    )

    assert view.id == 3
    assert view.categorizer is categorizer


def test_export_orders_by_importance_then_creation(
    user_directory, wiki_registry, message_catalog, config_store, categorizer
):
    records = [
        {"id": 1, "type": "brand-new", "message": "[]", "canonical_url": "a", "creation": 300},
        {"id": 2, "type": "mention", "message": "[]", "canonical_url": "b", "creation": 100},
        {"id": 3, "type": "mention", "message": "[]", "canonical_url": "c", "creation": 200},
    ]

    exported = export_notifications(
        records,
        _collaborators(user_directory, wiki_registry, message_catalog, config_store, categorizer),
    )

    assert [item["id"] for item in exported] == [3, 2, 1]
