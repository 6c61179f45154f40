"""Console task list with personal, academic and work tasks kept in a text file."""

__version__ = "0.1.0"