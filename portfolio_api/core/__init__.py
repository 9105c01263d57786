"""
Shared, cross-cutting code for the API.

`core/` holds the pieces every entity package uses: DB wiring, settings,
the SQL statement builders, the execution adapter and the error types.
Keep entity-specific column mapping in the corresponding package
(e.g. `projects/`).
"""
