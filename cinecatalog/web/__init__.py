"""API HTTP FastAPI du catalogue."""
