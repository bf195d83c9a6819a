"""Domain layer: value objects and exceptions. No I/O, no logging."""
