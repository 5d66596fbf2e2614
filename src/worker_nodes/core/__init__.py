"""Core building blocks: options, coercion, configuration, logging and errors."""
