"""Base layer: value types, DTOs, errors, logging and shared constants."""
