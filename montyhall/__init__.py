"""
Monty Hall - a Monte Carlo comparison of the stay and switch strategies.
"""

__version__ = "0.1.0"
