"""Jina Reader / Search HTTP client (one authenticated GET per call)."""
from __future__ import annotations
import logging
from typing import Any, Dict
import requests
from jinab.config.settings import READ_ENDPOINT, SEARCH_ENDPOINT

log = logging.getLogger(__name__)

class ClientError(Exception): ...
class TransportError(ClientError): ...

class ApiError(ClientError):
	def __init__(self, status: int, body: str, reason: str = ''):
		self.status = status
		self.body = body
		label = f'{status} {reason}'.strip()
		super().__init__(f'API request failed with status {label}: {body}')

class JinaClient:
	def __init__(self, session: Any = None):
		# Anything exposing requests' get(url, headers=...) will do
		self.session = session if session is not None else requests

	def fetch(self, endpoint: str, path: str, api_key: str, want_json: bool = False) -> str:
		"""GET <endpoint>/<path> and return the body text unmodified.

		`path` is passed through as given: a URL for read, a free-text query for
		search. Raises ApiError on a non-2xx status and TransportError when the
		request itself fails.
		"""
		url = f"{endpoint.rstrip('/')}/{path}"
		headers: Dict[str, str] = {'Authorization': f'Bearer {api_key}'}
		if want_json:
			headers['Accept'] = 'application/json'
		log.debug('GET %s (json=%s)', url, want_json)
		try:
			headers['Authorization'].encode('latin-1')
		except UnicodeEncodeError as e:
			raise TransportError('Request failed: API key is not a valid HTTP header value') from e
		try:
			resp = self.session.get(url, headers=headers)
		except (requests.RequestException, ValueError) as e:
			raise TransportError(f'Request failed: {e}') from e
		log.debug('Response status %s', resp.status_code)
		if not 200 <= resp.status_code < 300:
			raise ApiError(resp.status_code, resp.text, getattr(resp, 'reason', '') or '')
		return resp.text

	def read(self, url: str, api_key: str, want_json: bool = False) -> str:
		return self.fetch(READ_ENDPOINT, url, api_key, want_json)

	def search(self, query: str, api_key: str, want_json: bool = False) -> str:
		return self.fetch(SEARCH_ENDPOINT, query, api_key, want_json)
