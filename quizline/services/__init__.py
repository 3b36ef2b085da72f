"""Quiz services used by the socket handlers and HTTP routes."""
