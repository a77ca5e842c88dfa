"""
Helper functions to fetch ALL items from paginated management API collections
"""
import logging

log = logging.getLogger(__name__)

MAX_ALLOWED_LIMIT = 1000


def paged_get(space, method, skip=0):
    """
    Fetch every page of a collection and merge them into one response.

    The first page's response is kept as the aggregated response; items of
    each following page are appended to its 'items'.

    Args:
        space: Space instance
        method: Name of the Space list method (e.g., 'get_entries')
        skip: Offset of the first page (optional)

    Returns:
        dict: The first page's collection response, holding the items of all pages
    """
    aggregated_response = None
    fetch_page = getattr(space, method)

    while True:
        response = fetch_page({
            "skip": skip,
            "limit": MAX_ALLOWED_LIMIT,
            "order": "sys.createdAt",
        })

        if aggregated_response is None:
            aggregated_response = response
        else:
            aggregated_response["items"] = aggregated_response["items"] + response["items"]

        # A page without a total ends the collection.
        total = response.get("total", 0)
        log.debug(
            "%s: fetched %d items at skip=%d (total so far: %d of %d)",
            method, len(response["items"]), skip, len(aggregated_response["items"]), total,
        )

        if skip + MAX_ALLOWED_LIMIT > total:
            break
        skip += MAX_ALLOWED_LIMIT

    return aggregated_response


def extract_items(response):
    return response["items"]
