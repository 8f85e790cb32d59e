"""Kernel contracts – capability tags for values crossing the pipeline."""
from mp_middleware.kernel.contracts.response import Response, is_response

__all__ = ["Response", "is_response"]
