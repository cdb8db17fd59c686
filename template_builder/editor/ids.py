"""Identifier generation for templates, sections and components."""

import uuid


def generate_id() -> str:
    """Return a new collision-free identifier."""
    return str(uuid.uuid4())
