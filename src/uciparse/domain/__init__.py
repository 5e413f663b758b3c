"""Protocol domain: message values and the grammar for their text form."""

__all__ = ["grammar", "messages"]
