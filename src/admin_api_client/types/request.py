from typing import Any, Dict, Mapping, NotRequired, Sequence, Tuple, TypedDict, Union

Scalar = Union[str, int, float, bool]

# Recursive: scalars, sequences of fields, or nested mappings
SearchParamField = Union[Scalar, Sequence["SearchParamField"], Mapping[str, "SearchParamField"]]
SearchParams = Mapping[str, SearchParamField]

HeaderOptions = Mapping[str, Union[Scalar, Sequence[Scalar]]]


class Method:
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class RequestOptionsType(TypedDict, total=False):
    """Options accepted by a single request; the verb method supplies the HTTP method."""
    search_params: SearchParams
    headers: HeaderOptions
    data: Any  # str passes through, anything else is JSON encoded
    retries: int
    api_version: str


class RequestInit(TypedDict):
    """Request descriptor handed to the fetch collaborator."""
    method: str
    headers: Dict[str, str]
    body: NotRequired[str]


RequestParams = Tuple[str, RequestInit]
