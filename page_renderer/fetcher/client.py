"""
Fetcher GraphQL — récupère une page auprès du service de contenu (requests).

Toute erreur (transport, HTTP, JSON, GraphQL, validation) → Failed + log.
Page inconnue (page: null) → Ready avec une page vide.
"""
import logging
from typing import Optional

import requests

from .payload import ContentServiceError, extract_page, parse_page
from .query import build_page_request
from .state import FetchState, Failed, Ready

log = logging.getLogger(__name__)


class GraphQLContentFetcher:
    """
    Usage:
        >>> fetcher = GraphQLContentFetcher("http://127.0.0.1:8000/graphql")
        >>> state = fetcher.fetch("home")
    """

    def __init__(self, url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session

    def _post(self, name: str) -> requests.Response:
        http = self.session or requests
        return http.post(self.url, json=build_page_request(name), timeout=self.timeout)

    def fetch(self, name: str) -> FetchState:
        try:
            resp = self._post(name)
            resp.raise_for_status()
            payload = extract_page(resp.json())
            page = parse_page(payload, name)
        except requests.exceptions.JSONDecodeError as e:
            log.error("Réponse non JSON page %s : %s", name, e)
            return Failed(reason="payload")
        except requests.RequestException as e:
            log.error("Service de contenu injoignable (%s) : %s", name, e)
            return Failed(reason="transport")
        except ContentServiceError as e:
            log.error("Erreur GraphQL page %s : %s", name, e)
            return Failed(reason="graphql")
        except ValueError as e:
            # JSON invalide ou pydantic.ValidationError
            log.error("Payload invalide page %s : %s", name, e)
            return Failed(reason="payload")

        if payload is None:
            log.warning("Page inconnue du service : %s", name)
        else:
            log.info("Page %s chargée — %d blocs", name, len(page.blocks))
        return Ready(page=page)
