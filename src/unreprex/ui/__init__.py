"""User interfaces for unreprex."""
