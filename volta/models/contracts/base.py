"""
Base helpers for Volta contracts.
"""

import uuid


def generate_component_id() -> str:
    """
    Generate a globally unique component id.

    Returns:
        UUID string (e.g., "550e8400-e29b-41d4-a716-446655440000")
    """
    return str(uuid.uuid4())
