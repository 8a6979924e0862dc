"""Output layer: human (Rich) and JSON rendering of teardown results."""
