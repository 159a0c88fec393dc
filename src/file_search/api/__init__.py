"""Service layer for file search."""
