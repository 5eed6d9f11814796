import logging
from typing import Any, Callable, Dict, Optional

from aeo_transform.article import article
from aeo_transform.breadcrumbs import breadcrumbs
from aeo_transform.errors import MissingRootError, UnsupportedRootError
from aeo_transform.howto import howto
from aeo_transform.local_business import local_business
from aeo_transform.models import TransformOutput
from aeo_transform.organization import organization
from aeo_transform.product import product

PI_PREFIX = "?"

# Root element name -> mapper. OrgRoot is the one tag that differs from its @type.
MAPPERS: Dict[str, Callable[[Any], TransformOutput]] = {
    "Article": article,
    "HowTo": howto,
    "BreadcrumbList": breadcrumbs,
    "OrgRoot": organization,
    "LocalBusiness": local_business,
    "Product": product,
}


def find_root(document: Any) -> Optional[str]:
    """Return the first top-level key that is not a processing instruction."""
    if not isinstance(document, dict):
        return None
    return next((key for key in document if not key.startswith(PI_PREFIX)), None)


def transform(document: Dict[str, Any]) -> TransformOutput:
    """
    Convert a parsed document into HTML, JSON-LD and meta.

    Raises:
        MissingRootError: no element key besides processing instructions
        UnsupportedRootError: the root element has no mapper
    """
    root = find_root(document)
    if root is None:
        raise MissingRootError()

    mapper = MAPPERS.get(root)
    if mapper is None:
        raise UnsupportedRootError(root)

    logging.debug(f"Transforming <{root}> with {mapper.__name__}()")
    return mapper(document[root])
