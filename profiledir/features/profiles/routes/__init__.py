"""Route handlers for the profile feature."""
