"""Presentation views for Notiheze notifications."""
