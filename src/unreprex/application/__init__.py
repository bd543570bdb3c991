"""Application layer for unreprex."""
