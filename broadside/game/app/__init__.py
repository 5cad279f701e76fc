"""Session orchestration for a single human vs. computer game."""
