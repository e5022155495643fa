"""Application services orchestrating domain logic through ports."""
