"""HTTP application for the task store service."""
