"""Layout primitives, node styles and scene descriptions."""
