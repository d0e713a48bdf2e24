"""Games built on the Avoider framework."""
