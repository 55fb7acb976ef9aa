"""Response assembly core."""
