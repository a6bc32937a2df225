"""Environment-specific Django settings."""
