"""Static data."""

from medlens.data.demo_documents import demo_documents, load_demo_data

__all__ = ["demo_documents", "load_demo_data"]
