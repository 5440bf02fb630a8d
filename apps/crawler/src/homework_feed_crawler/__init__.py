"""Homework feed producer: portal client, calendar serializer and refresh tasks."""
