import requests

from space_export import config


class ManagementClient:
    CONTENT_TYPE = "application/vnd.contentful.management.v1+json"

    def __init__(self, access_token, host=config.DEFAULT_MANAGEMENT_HOST, timeout=config.DEFAULT_REQUEST_TIMEOUT):
        self.host = host
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": self.CONTENT_TYPE,
        }

    @property
    def base_url(self):
        return f"https://{self.host}"

    def request(self, method, path, params=None, json=None):
        """
        Makes a request to the management API.

        Args:
            method (str): HTTP method (GET, POST, etc.)
            path (str): API endpoint path (e.g., '/spaces/abc123/entries')
            params (dict, optional): Query parameters.
            json (dict, optional): JSON body.

        Returns:
            dict or str: Parsed JSON response if available, else raw text.

        Raises:
            requests.exceptions.HTTPError: If the response status code is not 2xx.
            RuntimeError: If the request could not be sent at all.
        """
        try:
            response = requests.request(
                method=method,
                url=f"{self.base_url}{path}",
                headers=self.headers,
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise RuntimeError(f"Network error occurred: {e}") from e

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise requests.exceptions.HTTPError(
                f"{method} {path} failed: {e} | {describe_error(response)}",
                response=response,
            ) from e

        try:
            return response.json()
        except ValueError:
            return response.text

    def get_space(self, space_id):
        """Looks up a space and returns a Space bound to this client."""
        data = self.request("GET", f"/spaces/{space_id}")
        return Space(self, space_id, data)


def describe_error(response):
    """Returns "<error id>: <message>" from an API error body, or the raw body text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if not isinstance(body, dict):
        return response.text

    error_id = (body.get("sys") or {}).get("id", "UnknownError")
    message = body.get("message")
    return f"{error_id}: {message}" if message else error_id


class Space:
    """A single space; list methods return the API's collection envelope as-is."""

    def __init__(self, client, space_id, data=None):
        self.client = client
        self.space_id = space_id
        self.data = data or {}

    def _get(self, path, params=None):
        return self.client.request("GET", f"/spaces/{self.space_id}{path}", params=params)

    def get_content_types(self, params=None):
        return self._get("/content_types", params)

    def get_entries(self, params=None):
        return self._get("/entries", params)

    def get_assets(self, params=None):
        return self._get("/assets", params)

    def get_locales(self, params=None):
        return self._get("/locales", params)

    def get_webhooks(self, params=None):
        return self._get("/webhook_definitions", params)

    def get_editor_interface(self, content_type):
        """Fetches the editor interface of a content type record."""
        content_type_id = content_type["sys"]["id"]
        return self._get(f"/content_types/{content_type_id}/editor_interface")


def load_client(access_token=None):
    """
    Builds a ManagementClient from environment configuration.
    An explicit token overrides SOURCE_MANAGEMENT_TOKEN.
    """
    return ManagementClient(
        access_token or config.get_management_token(),
        host=config.get_management_host(),
        timeout=config.get_request_timeout(),
    )
