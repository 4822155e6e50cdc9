"""HTTP routers — health, root, and the not-found fallback."""
