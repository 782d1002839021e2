"""Fetchers de contenu — états, décodage, GraphQL, seeds."""
from .state import ContentFetcher, FetchState, Failed, PageContent, Pending, Ready
from .payload import ContentServiceError, extract_page, normalize_block, parse_page
from .query import GET_PAGE_QUERY, build_page_request
from .client import GraphQLContentFetcher
from .seed import SeedContentFetcher

__all__ = [
    "ContentFetcher", "FetchState", "Failed", "PageContent", "Pending", "Ready",
    "ContentServiceError", "extract_page", "normalize_block", "parse_page",
    "GET_PAGE_QUERY", "build_page_request",
    "GraphQLContentFetcher", "SeedContentFetcher",
]
