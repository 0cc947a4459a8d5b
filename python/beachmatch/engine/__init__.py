"""Board-simulation engine components."""
