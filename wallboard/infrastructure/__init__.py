"""Infrastructure Layer - logging setup and the process-wide dashboard singleton."""
