"""Business logic services for markblog."""
