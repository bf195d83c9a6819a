"""Application layer: descriptor normalization, validation, assertions, reporting."""
