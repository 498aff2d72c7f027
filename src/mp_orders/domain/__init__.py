"""Domain model: the Order aggregate and the Product entity."""
