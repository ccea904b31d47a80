"""Upload adapters - botvs rsync endpoint clients."""

from .http import HttpScriptUploader, create_http_client, encode_push_form

__all__ = ["HttpScriptUploader", "create_http_client", "encode_push_form"]
