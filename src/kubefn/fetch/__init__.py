from .fetcher import fetch_functions

__all__ = ["fetch_functions"]
