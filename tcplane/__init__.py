"""An asyncio TCP server that reads one request per connection and runs it through ordered handlers."""

__version__ = "5.0.0"
__all__ = ["config", "context", "errors", "response", "server", "stream", "utils"]