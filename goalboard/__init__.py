"""Goal board data model and in-memory board service."""
