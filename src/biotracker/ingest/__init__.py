"""Entry sources."""
from .demo_data import build_demo_store, generate_demo_entries

__all__ = [
    "build_demo_store",
    "generate_demo_entries",
]
