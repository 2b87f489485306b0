"""Routes de l'API."""
