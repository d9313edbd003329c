"""Command implementations for the tracker CLI."""
