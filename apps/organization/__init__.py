"""Organizations, people and their addresses."""
