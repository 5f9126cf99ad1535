"""Core configuration, crypto and wiring."""
