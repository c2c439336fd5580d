"""Core building blocks: API layer, task models and logging helpers."""
