"""Command line interface for symsearch."""
