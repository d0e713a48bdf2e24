"""Avoider: dodge the orbs, catch the fire balls, shoot back."""
