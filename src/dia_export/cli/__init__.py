"""Command-line interface for dia-export."""
