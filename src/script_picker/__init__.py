"""script-picker: browse a read-me documented script collection and pre-type a call."""

__version__ = "0.1.0"
