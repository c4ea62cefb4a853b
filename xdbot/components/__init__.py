"""Chat command sets."""
