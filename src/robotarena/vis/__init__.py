"""Text and image renderers for arena states."""
