"""Application layer - matching and tide services."""
