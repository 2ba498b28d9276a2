"""Books use cases."""
