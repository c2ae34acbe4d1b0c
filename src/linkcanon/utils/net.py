# LinkCanon — Networking utilities (requests session for redirect lookups)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def build_session(user_agent: str, retries: int = 0, backoff: float = 0.5) -> requests.Session:
	"""Build a requests Session used for single-hop HEAD lookups.

	Redirects are never followed by Retry; callers pass allow_redirects=False and read Location.
	"""
	s = requests.Session()
	s.headers.update(
		{
			"User-Agent": user_agent,
			"Accept": "*/*",
		}
	)
	retry = Retry(
		total=retries,
		redirect=0,
		backoff_factor=backoff,
		status_forcelist=(429, 500, 502, 503, 504),
		allowed_methods=frozenset({"HEAD"}),
		raise_on_redirect=False,
		raise_on_status=False,
	)
	adapter = HTTPAdapter(max_retries=retry)
	s.mount("http://", adapter)
	s.mount("https://", adapter)
	return s
