"""Infrastructure layer: in-memory host implementation and snapshot loading."""
