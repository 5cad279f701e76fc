"""Broadside naval combat game."""
