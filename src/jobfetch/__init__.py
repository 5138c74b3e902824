"""jobfetch: daily SerpAPI Google Jobs digest delivered by email."""

__version__ = "0.1.0"
