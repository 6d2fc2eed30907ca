"""Favorites endpoints: list, create and delete entries joined with the catalog."""
