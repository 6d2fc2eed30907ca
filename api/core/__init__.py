"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every endpoint uses (DB wiring,
settings, CORS, error mapping). Endpoint SQL lives in the feature packages
(`favorites/`, `items/`).
"""
