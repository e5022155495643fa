"""Domain models and exceptions for the Server Time API."""
