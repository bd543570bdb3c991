"""Application services composing features into user-facing operations."""
