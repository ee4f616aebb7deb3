"""Blackhole Jumper: an arcade platform jumper above a hungry black hole."""

__version__ = "0.1.0"
