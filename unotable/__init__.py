"""Four-seat UNO table: one human against three bots."""

__version__ = "0.1.0"
