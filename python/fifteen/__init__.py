"""A 4×4 sliding-tile puzzle with terminal and desktop frontends."""
