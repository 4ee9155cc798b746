"""Store access, config documents and lookup indexes."""
