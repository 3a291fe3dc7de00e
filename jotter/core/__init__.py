"""Core state, models, and transitions for Jotter."""
