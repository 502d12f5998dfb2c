"""Entry points consuming the worth tracker core."""
