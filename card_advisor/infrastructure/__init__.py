"""Infrastructure layer - database and repositories."""
