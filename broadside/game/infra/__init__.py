"""Infrastructure: configuration, app-data paths and logging."""
