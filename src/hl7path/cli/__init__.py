"""Command-line interface for hl7path."""
