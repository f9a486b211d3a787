"""Command-line interface for pfp."""
