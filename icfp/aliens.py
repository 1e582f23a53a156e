"""
Client for the alien API exposed by the contest server.

Every call is authenticated with the ``apiKey`` query parameter. HTTP status
codes are returned to the caller untouched; transport failures propagate as
``requests.exceptions.RequestException``.
"""

import logging
from typing import Union

import requests

from .modulation import demodulate, modulate

logger = logging.getLogger(__name__)


class AlienClient:
    """
    Thin wrapper around the ``/aliens/...`` endpoints.

    A fresh request is issued per call; nothing is pooled or retried.
    """

    def __init__(self, server_url: str, api_key: str):
        """
        Args:
            server_url: Base URL of the contest server (trailing slashes are dropped)
            api_key: Team API key sent as the ``apiKey`` query parameter
        """
        self.server_url = server_url.rstrip("/")
        self.api_key = api_key

    @property
    def _params(self) -> dict:
        return {"apiKey": self.api_key}

    def send(self, content: Union[str, bytes]) -> requests.Response:
        """POST content to ``/aliens/send``"""
        url = f"{self.server_url}/aliens/send"
        logger.debug(f"Sending {len(content)} bytes to {url}")
        return requests.post(url, data=_as_bytes(content), params=self._params)

    def echo(self, content: Union[str, bytes]) -> requests.Response:
        """POST content to the server root"""
        logger.debug(f"Echoing {len(content)} bytes via {self.server_url}")
        return requests.post(
            self.server_url, data=_as_bytes(content), params=self._params
        )

    def get_response(self, response_id: str) -> requests.Response:
        """Fetch a previously produced response by id"""
        url = f"{self.server_url}/aliens/{response_id}"
        logger.debug(f"Fetching {url}")
        return requests.get(url, params=self._params)

    def send_program(self, value):
        """
        Modulate value, send it and demodulate the reply.

        Raises:
            requests.exceptions.HTTPError: server answered with an error status
            ValueError: reply body is not valid modulated data
        """
        response = self.send(modulate(value))
        response.raise_for_status()
        return demodulate(response.text)


def _as_bytes(content: Union[str, bytes]) -> bytes:
    if isinstance(content, str):
        return content.encode()
    return content
