"""
Messaging toolkit: an in-memory message store, the FastAPI layer serving it,
and a small HTTP client for front-end style callers.
"""
