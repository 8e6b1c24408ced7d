"""Picker settings: schema validation and the persisted settings manager."""
