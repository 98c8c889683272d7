"""Application layer: ports and the termination probe service."""
