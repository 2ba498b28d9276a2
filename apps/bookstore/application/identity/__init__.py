"""Identity collaborators."""
