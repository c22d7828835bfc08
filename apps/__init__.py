"""Maze editor front-end (pygame + pygame_gui)."""
