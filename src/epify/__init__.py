"""epify - organize TV episodes and movies using the Jellyfin naming scheme."""

__version__ = "0.1.0"
