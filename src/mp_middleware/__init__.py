"""
mp_middleware – Sequential request/response middleware dispatch.

Import path convention::

    from mp_middleware import dispatch
    from mp_middleware.application.pipeline import Dispatcher, Pipeline
    from mp_middleware.kernel.errors import InvalidHandlerError
    from mp_middleware.kernel.contracts import Response
"""

from mp_middleware.application.pipeline import Dispatcher, Pipeline, dispatch

__version__ = "0.1.0"
__all__ = ["Dispatcher", "Pipeline", "__version__", "dispatch"]
