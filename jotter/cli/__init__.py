"""Typer command line interface for Jotter."""
