"""HomeMatch rental discovery client"""

from homematch.context import AppContext, create_app_context

__version__ = "0.1.0"

__all__ = ["AppContext", "create_app_context", "__version__"]
