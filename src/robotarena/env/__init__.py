"""Arena, robots, and the saved-state text format."""
