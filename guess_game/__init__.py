"""Command-line number guessing game."""
