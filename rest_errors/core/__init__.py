"""Core application wiring: configuration and middleware."""
