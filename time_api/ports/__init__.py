"""Port interfaces implemented by infrastructure adapters."""
