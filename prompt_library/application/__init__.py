"""Application layer orchestrating domain operations."""
