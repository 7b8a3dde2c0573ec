"""Task manager backend: tasks, categories, filtering and validation."""
