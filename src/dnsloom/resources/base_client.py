# dnsloom/resources/base_client.py
"""Defines the base class for all DNSimple resource services in the dnsloom library."""

from typing import TYPE_CHECKING

from ..log_config import logger
from ..options import ListOptions
from ..request_builder import RequestBuilder
from ..types import RawResponse, RequestData

if TYPE_CHECKING:
    from ..client import DnsloomClient


class ServiceBase:
    """Base class for all resource services.

    Holds a reference to the client and gives subclasses access to its
    transport: a recycled ``RequestBuilder`` and ``execute()``.

    Attributes:
        _client: The DnsloomClient the service belongs to.
    """

    def __init__(self, client: "DnsloomClient"):
        """Initialize the service.

        Args:
            client: An instance of DnsloomClient.
        """
        self._client = client
        logger.debug(f"{self.__class__.__name__} initialized")

    def build_request_for_path(self, path: str) -> RequestBuilder:
        """Returns a builder for ``path``, freshly reset."""
        return self._client.http.request_builder(path)

    def execute(self, request: RequestData) -> RawResponse:
        return self._client.http.execute(request)

    @staticmethod
    def add_list_options_to_request(
        options: ListOptions | None, builder: RequestBuilder
    ) -> None:
        """Adds sorting, filtering and pagination to the query string.

        Parameters are added in that order. Pagination is only added when it
        differs from the API defaults.
        """
        if options is None:
            return
        sorting = options.unpack_sorting()
        if sorting is not None:
            builder.add_parameter(sorting)
        if options.has_filter_options():
            builder.add_parameters(options.unpack_filters())
        if not options.pagination.is_default():
            builder.add_parameters(options.unpack_pagination())
