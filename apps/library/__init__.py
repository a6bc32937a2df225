"""Books, their authors and tags."""
