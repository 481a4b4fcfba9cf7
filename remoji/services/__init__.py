"""Search, substitution and import services for remoji."""
