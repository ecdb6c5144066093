"""HTTP API (FastAPI) and the in-memory comments store."""
