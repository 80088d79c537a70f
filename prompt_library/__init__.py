"""Prompt library package.

Domain model, storage adapters and HTTP interface for sharing prompt templates.
"""
