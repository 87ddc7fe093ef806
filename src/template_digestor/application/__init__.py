"""Application layer: digest computation and dependency reporting."""
