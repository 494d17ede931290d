"""Configuration and search helpers built on the domain layer."""
