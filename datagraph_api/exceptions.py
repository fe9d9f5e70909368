# datagraph_api/exceptions.py

class DataGraphError(Exception):
    """Base class for every error raised by the data graph packages."""
    pass

class ParseError(DataGraphError):
    """Raised when an input document is malformed or lacks an identifying field."""
    pass
