"""CLI module for gutensearch."""
