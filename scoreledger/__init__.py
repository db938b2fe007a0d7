"""Console ledger for player records and game scores kept in a CSV file."""

__version__ = "0.1.0"
__all__ = ["cli", "records", "storage"]