"""
CSVNF: load a CSV file into a SQL table.
"""

__version__ = "0.1.0"
