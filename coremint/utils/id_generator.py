"""
ID generation utilities for CoreMint.

Knowledge items: km_xxx (32 hex characters, full UUID4)
"""

from uuid import uuid4


def generate_item_id() -> str:
    """
    Generate unique knowledge item ID.

    Returns:
        ID in format "km_xxx" where xxx is the 32 hex characters of a UUID4
    """
    return f"km_{uuid4().hex}"
