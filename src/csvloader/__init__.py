"""
nested-csv-loader: parse dot-path CSV files into nested records and load them into PostgreSQL.
"""

__version__ = "0.1.0"
