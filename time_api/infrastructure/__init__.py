"""Infrastructure adapters for the Server Time API."""
