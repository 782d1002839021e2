"""Requête GraphQL GetPage — le nom de page passe en variable, jamais interpolé."""
from typing import Any, Dict

GET_PAGE_QUERY = """
query GetPage($name: String!) {
  page(name: $name) {
    name
    time
    version
    blocks {
      id
      type
      ... on ParagraphBlock { data { text } }
      ... on HeaderBlock { data { text level } }
      ... on ListBlock { data { style items } }
    }
  }
}
""".strip()


def build_page_request(name: str) -> Dict[str, Any]:
    """Corps JSON POST pour récupérer la page `name`."""
    return {
        "operationName": "GetPage",
        "query":         GET_PAGE_QUERY,
        "variables":     {"name": name},
    }
