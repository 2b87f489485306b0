"""Commandes CLI (Typer + Rich)."""
