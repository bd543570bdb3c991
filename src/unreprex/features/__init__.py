"""Feature packages for unreprex."""
