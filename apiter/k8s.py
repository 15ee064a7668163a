import math
import kubernetes
from apiter import exceptions
from apiter.client import Continuation, ListResult, PagedClient, Settings


default_settings = {
    "disable_compress": False,
}


class KubernetesClient(PagedClient):
    """List a kubernetes resource page by page.

    Kubernetes pages with continue tokens. The token returned with one page
    is kept in the query under ``_continue``, with the page it leads to under
    ``_continue_page``, so pages after the first must be fetched in order.
    """

    k8s_client = None

    def __init__(self, path, api_version, kind, context=None, **kwargs):
        self.path = path
        self.api_version = api_version
        self.kind = kind
        self.context = context
        self.settings = Settings(**{**default_settings, **kwargs})
        self._connect()

    def use_context(self, context):
        self.context = context
        self._connect()

    def _connect(self):
        self.k8s_client = kubernetes.config.new_client_from_config(
            self.path, context=self.context
        )
        self.dynamic_client = kubernetes.dynamic.DynamicClient(self.k8s_client)
        self.api_spec = self.dynamic_client.resources.get(
            api_version=self.api_version, kind=self.kind
        )

    def list(self, options, query):
        page = options["page"]
        next_query = dict(query)
        token = next_query.pop("_continue", None)
        token_page = next_query.pop("_continue_page", None)

        if page == 1:
            token = None
        elif token is None or page != token_page:
            raise exceptions.InvalidPageIndex(
                'Page "%s" can only be fetched right after page "%s".'
                % (page, page - 1)
            )

        kwargs = dict(next_query)
        kwargs["_continue"] = token
        kwargs["limit"] = options["limit"]
        if self.settings.disable_compress is False:
            kwargs["header_params"] = {"Accept-Encoding": "gzip"}

        response = self.api_spec.get(**kwargs).to_dict()

        # a named get returns the object itself
        if "items" not in response:
            return ListResult([response], Continuation.END, next_query)

        metadata = response.get("metadata") or {}
        token = metadata.get("continue")
        if not token:
            return ListResult(response["items"], Continuation.END, next_query)

        next_query["_continue"] = token
        next_query["_continue_page"] = page + 1
        remaining = metadata.get("remainingItemCount")
        if remaining is None:
            continuation = Continuation.UNKNOWN
        else:
            continuation = Continuation.total(
                page + math.ceil(remaining / options["limit"])
            )
        return ListResult(response["items"], continuation, next_query)
