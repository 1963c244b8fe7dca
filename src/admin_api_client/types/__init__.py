# Export all types
from .common import CustomFetchApi, LogContentType, Logger
from .request import (
    HeaderOptions, Method, RequestInit, RequestOptionsType, RequestParams,
    Scalar, SearchParamField, SearchParams
)
