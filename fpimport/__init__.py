"""Building blocks for importing Flashpoint games, playlists and images into launchers."""

__version__ = "0.1.0"