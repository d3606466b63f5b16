"""Qt presentation layer and shared rendering helpers."""
