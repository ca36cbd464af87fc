"""websurf - scrapers that turn upstream search engine pages into normalized results."""

__version__ = "0.1.0"
