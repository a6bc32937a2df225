"""Project core: Result container, configuration and logging."""
