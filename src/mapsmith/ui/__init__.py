"""User-facing entry points for mapsmith."""
