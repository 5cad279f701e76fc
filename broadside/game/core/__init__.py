"""Core game state: board, placement, shots and fleets."""
