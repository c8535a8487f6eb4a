"""Pure services with no I/O."""
