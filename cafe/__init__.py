"""terminal front-end for the cafe ordering database"""

__version__ = "0.1.0"
