"""Core configuration for markblog."""
