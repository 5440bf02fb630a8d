"""Celery beat schedule for twice-daily calendar regeneration."""
