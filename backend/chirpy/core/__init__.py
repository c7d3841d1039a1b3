"""Framework glue: configuration, logging, errors, security primitives."""
