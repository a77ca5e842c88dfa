"""Shared fixtures: an in-memory space that serves paged collections."""

import pytest
import requests


def make_records(prefix, count):
    return [{"sys": {"id": f"{prefix}{i}"}} for i in range(count)]


class FakeSpace:
    """Serves collections the way the management API pages them."""

    def __init__(self, collections=None, editor_interface_errors=()):
        self.collections = collections or {}
        self.editor_interface_errors = set(editor_interface_errors)
        self.calls = []

    def _page(self, method, params):
        self.calls.append((method, dict(params)))
        items = self.collections.get(method, [])
        skip, limit = params["skip"], params["limit"]
        return {
            "sys": {"type": "Array"},
            "total": len(items),
            "skip": skip,
            "limit": limit,
            "items": items[skip:skip + limit],
        }

    def get_content_types(self, params=None):
        return self._page("get_content_types", params)

    def get_entries(self, params=None):
        return self._page("get_entries", params)

    def get_assets(self, params=None):
        return self._page("get_assets", params)

    def get_locales(self, params=None):
        return self._page("get_locales", params)

    def get_webhooks(self, params=None):
        return self._page("get_webhooks", params)

    def get_editor_interface(self, content_type):
        content_type_id = content_type["sys"]["id"]
        self.calls.append(("get_editor_interface", content_type_id))
        if content_type_id in self.editor_interface_errors:
            raise requests.exceptions.HTTPError("HTTP Error: 404 Client Error: Not Found")
        return {"sys": {"id": "default", "contentType": {"sys": {"id": content_type_id}}}, "controls": []}

    def methods_called(self):
        return [call[0] for call in self.calls]


class FakeClient:
    def __init__(self, space=None, error=None):
        self.space = space
        self.error = error
        self.host = "api.example.test"
        self.requested = []

    def get_space(self, space_id):
        self.requested.append(space_id)
        if self.error is not None:
            raise self.error
        return self.space


@pytest.fixture
def fake_space():
    return FakeSpace({
        "get_content_types": make_records("ct", 3),
        "get_entries": make_records("entry", 2500),
        "get_assets": make_records("asset", 12),
        "get_locales": make_records("locale", 2),
        "get_webhooks": make_records("hook", 1),
    })


@pytest.fixture
def fake_client(fake_space):
    return FakeClient(fake_space)
