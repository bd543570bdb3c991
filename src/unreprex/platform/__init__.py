"""Platform services shared across features."""
