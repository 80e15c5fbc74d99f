"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses: DB wiring,
row formatting, response envelopes, error handlers and logging. Keep
feature-specific SQL in the corresponding feature package (e.g. `stations/`).
"""
