"""Infrastructure layer - logging and singleton support."""
