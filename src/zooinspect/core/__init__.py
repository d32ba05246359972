"""Core configuration and logging for zooinspect."""
