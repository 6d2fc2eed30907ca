"""Catalog (sneakers) listing endpoint."""
