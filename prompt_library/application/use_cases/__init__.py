"""Use cases grouped by aggregate."""
