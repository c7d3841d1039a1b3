"""Cross-cutting service primitives."""
