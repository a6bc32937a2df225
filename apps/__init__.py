"""Django applications of the exceptional project."""
