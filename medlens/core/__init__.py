"""Cross-cutting infrastructure: logging and value parsing."""
