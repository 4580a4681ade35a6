"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that features use
(DB wiring, errors, logging, application state). Keep feature-specific SQL
and business logic in the corresponding feature package (e.g. `users/`).
"""
