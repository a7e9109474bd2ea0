"""Application layer – flag store and its backend port."""
