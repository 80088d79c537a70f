"""Delivery interfaces exposing the application."""
