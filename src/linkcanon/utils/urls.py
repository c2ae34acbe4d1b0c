# LinkCanon — URL utilities: canonical host+path keys and their variants
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from urllib.parse import urlsplit, urlunsplit
from typing import List
import re


WEB_SCHEME_RE = re.compile(r"^https?://")
WWW_PREFIX_RE = re.compile(r"^www\.", re.IGNORECASE)
# urlsplit drops these silently instead of rejecting the URL
STRIPPED_CONTROL_CHARS = ("\t", "\r", "\n")


def extract_host_and_path(url: str) -> str:
	"""Return host+path of url without scheme, leading www., query, fragment or trailing /.

	Strings that cannot be parsed come back as-is, minus one trailing /.
	Schemeless input has no authority, so "www.x.com/a/" gives "www.x.com/a".
	"""
	trimmed = url[:-1] if url.endswith("/") else url
	if any(c in trimmed for c in STRIPPED_CONTROL_CHARS):
		return trimmed
	try:
		p = urlsplit(trimmed)
	except ValueError:
		return trimmed
	host = p.netloc.rpartition("@")[2]
	host = WWW_PREFIX_RE.sub("", host, count=1)
	return host + p.path


def generate_url_combinations(url: str) -> List[str]:
	"""All 8 scheme/www/trailing-slash spellings of the same URL, in a fixed order.

	Does not check that url is an actual URL.
	"""
	if url == "":
		return []

	hp = extract_host_and_path(url)
	return [
		"https://www." + hp + "/",  # https + www + trailing /
		"http://www." + hp + "/",  # http + www + trailing /
		"https://" + hp + "/",  # https + trailing /
		"http://" + hp + "/",  # http + trailing /
		"https://www." + hp,  # https + www
		"http://www." + hp,  # http + www
		"https://" + hp,  # https
		"http://" + hp,  # http
	]


def url_hostname_extractor(url: str) -> str:
	"""Hostname of url (scheme optional) with a leading www. removed."""
	if url == "":
		return ""
	if not WEB_SCHEME_RE.match(url):
		url = "//" + url
	try:
		host = urlsplit(url).hostname or ""
	except ValueError:
		return ""
	return WWW_PREFIX_RE.sub("", host, count=1)


def format_domain_url(url: str) -> str:
	"""Hostname of a scheme-bearing URL; anything else is returned unchanged."""
	try:
		host = urlsplit(url).hostname
	except ValueError:
		return url
	return host or url


def domain_name_without_tld(url: str) -> str:
	"""First label of the host, e.g. https://www.surfe.com/some-path -> surfe."""
	if not url.startswith("http"):
		url = "http://" + url
	try:
		host = urlsplit(url).hostname or ""
	except ValueError:
		return ""
	host = WWW_PREFIX_RE.sub("", host, count=1)
	parts = host.split(".")
	if len(parts) > 1:
		return parts[0]
	return host


def remove_query_params(url: str) -> str:
	try:
		p = urlsplit(url)
	except ValueError:
		return url
	path = p.path[:-1] if p.path.endswith("/") else p.path
	return urlunsplit(p._replace(query="", path=path))


__all__ = [
	"extract_host_and_path",
	"generate_url_combinations",
	"url_hostname_extractor",
	"format_domain_url",
	"domain_name_without_tld",
	"remove_query_params",
]
