"""Shared models and storage for xdbot."""
