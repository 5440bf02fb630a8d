"""Shared domain model for the homework calendar feed."""
