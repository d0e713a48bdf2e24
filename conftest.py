"""Pytest setup shared by every test suite: headless SDL drivers."""
import os

# Must be set before pygame initializes its display or mixer
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
