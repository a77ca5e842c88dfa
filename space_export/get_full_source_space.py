"""
Gets all the content from a space via the management API, including
content in draft state.
"""
import logging

import requests

from space_export.pagination_helper import paged_get, extract_items

log = logging.getLogger(__name__)

SPACE_NOT_FOUND_HINT = """
The source space was not found. This can happen for multiple reasons:
- If you haven't yet, you should create your space manually.
- If your space is in another organization, and the user behind your token does not have access to it, you'll need to specify separate source and destination management tokens.

Full error details below.
"""


def get_full_source_space(management_client, space_id, skip_content_model=False,
                          skip_content=False, skip_webhooks=False):
    """
    Fetch content types, entries, assets, locales, webhooks and editor
    interfaces of a space.

    Args:
        management_client: ManagementClient instance
        space_id: ID of the space to read from
        skip_content_model: Don't fetch content types, locales or editor interfaces
        skip_content: Don't fetch entries or assets
        skip_webhooks: Don't fetch webhooks

    Returns:
        dict: content_types, entries, assets, locales, webhooks and
        editor_interfaces lists. Skipped collections are empty.

    Raises:
        requests.exceptions.HTTPError, RuntimeError: If the space lookup or
        one of the paginated fetches fails.
    """
    log.info("Getting content from source space")

    try:
        space = management_client.get_space(space_id)
    except (requests.exceptions.HTTPError, RuntimeError):
        log.error(SPACE_NOT_FOUND_HINT)
        raise

    response = {
        "content_types": [] if skip_content_model else extract_items(paged_get(space, "get_content_types")),
        "entries": [] if skip_content else extract_items(paged_get(space, "get_entries")),
        "assets": [] if skip_content else extract_items(paged_get(space, "get_assets")),
        "locales": [] if skip_content_model else extract_items(paged_get(space, "get_locales")),
        "webhooks": [] if skip_webhooks else extract_items(paged_get(space, "get_webhooks")),
        "editor_interfaces": [],
    }

    if response["content_types"]:
        response["editor_interfaces"] = get_editor_interfaces(space, response["content_types"])

    response["editor_interfaces"] = [
        editor_interface for editor_interface in response["editor_interfaces"]
        if editor_interface is not None
    ]
    return response


def get_editor_interfaces(space, content_types):
    """Returns one editor interface per content type, None where the fetch failed."""
    editor_interfaces = []
    for content_type in content_types:
        # Old content types may not have an editor interface. That is dealt
        # with at a later stage and must not stop the export.
        try:
            editor_interfaces.append(space.get_editor_interface(content_type))
        except (requests.exceptions.HTTPError, RuntimeError, KeyError) as e:
            log.warning(
                "No editor interface for content type %s: %s",
                content_type.get("sys", {}).get("id"), e,
            )
            editor_interfaces.append(None)
    return editor_interfaces
