"""Alumni Hub: alumni network backend with ranked directory search"""

__version__ = "0.1.0"
