# LinkCanon — LinkedIn URL recognition, cleaning and handle extraction
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
from urllib.parse import quote, unquote, unquote_plus

from ..errors import NotLinkedInURLError


logger = logging.getLogger(__name__)

LINKEDIN_TYPES = ("pub", "in", "profile", "company", "school")

LINKEDIN_URL_RE = re.compile(
	r"https?://([0-9A-Za-z_]+\.)?linkedin\.com/(" + "|".join(LINKEDIN_TYPES) + r")/[^/?\s]+"
)
LINKEDIN_TYPE_RE = re.compile(r"linkedin\.com/(" + "|".join(LINKEDIN_TYPES) + r")/([^/ ?]+)")
# letters (any script), ASCII digits and hyphens
HANDLE_RE = re.compile(r"^(?:[^\W\d_]|[0-9-])+\Z")

# Same characters Go's url.PathEscape leaves alone in a path segment
PATH_SEGMENT_SAFE = "$&+:=@"

CONTACT_PROFILE_ROOT = "https://linkedin.com/in/"
ORGANIZATION_PROFILE_ROOT = "https://linkedin.com/company/"
TWITTER_ROOT = "https://twitter.com/"


def linkedin_url_cleaner_err(raw_url: str, escape_handle: bool = False) -> str:
	"""Clean a LinkedIn URL down to scheme, host, type and handle.

	The leftmost LinkedIn URL found in raw_url wins; query strings, fragments and
	extra path segments after the handle are dropped. With escape_handle the handle
	is unescaped first and then escaped, so encoded and raw UTF-8 input converge.

	Raises NotLinkedInURLError (with .value == raw_url) when nothing matches.
	"""
	m = LINKEDIN_URL_RE.search(raw_url)
	if not m:
		raise NotLinkedInURLError(raw_url)

	prefix, _, handle = m.group(0).rpartition("/")
	if escape_handle:
		# Unescape first to make sure we won't double escape
		handle = quote(unquote(handle), safe=PATH_SEGMENT_SAFE)
	return prefix + "/" + handle


def linkedin_url_cleaner(raw_url: str) -> str:
	"""Clean URL with only scheme, hostname and path, or "" when raw_url is not a LinkedIn URL."""
	try:
		return linkedin_url_cleaner_err(raw_url, False)
	except NotLinkedInURLError:
		return ""


def is_linkedin_url(raw_url: str) -> bool:
	if not raw_url:
		return False
	return LINKEDIN_URL_RE.search(raw_url) is not None


def url_profile_extract(s: str) -> str:
	"""Handle of a LinkedIn profile/company/school URL; bare handles pass through."""
	if not s:
		return ""
	if HANDLE_RE.match(s):
		return s
	m = LINKEDIN_TYPE_RE.search(s)
	if not m:
		return ""
	return unquote_plus(m.group(2))


def extract_linkedin_slug(s: str) -> str:
	"""Extract the LinkedIn slug from free-form input such as "abc-xyz (Company)"."""
	if not s:
		return ""

	# fragments and one trailing slash
	s = s.split("#", 1)[0]
	if s.endswith("/"):
		s = s[:-1]

	if HANDLE_RE.match(s):
		return s

	# trailing text added by the user
	tokens = s.split()
	if not tokens:
		return ""

	m = LINKEDIN_TYPE_RE.search(tokens[0])
	if not m:
		return ""
	return unquote_plus(m.group(2))


def match_linkedin_url(url_a: str, url_b: str) -> bool:
	"""True when both URLs are equal once trailing slashes go, and are LinkedIn URLs."""
	url_a = url_a.rstrip("/")
	url_b = url_b.rstrip("/")
	return url_a == url_b and linkedin_url_cleaner(url_a) != ""


def match_li_url_by_id_or_handle(s: str, id_or_handle: str) -> bool:
	"""Loose check that s is a LinkedIn URL mentioning id_or_handle as a whole word.

	This is a word-boundary substring match, not handle equality: an id that
	appears as a query parameter value also matches.
	"""
	if not id_or_handle:
		return False
	try:
		pattern = re.compile(r"^(?:https?://)?(?:www\.)?linkedin\.com.*?\b" + id_or_handle + r"\b")
	except re.error:
		logger.debug("Unusable id or handle for LinkedIn match: %r", id_or_handle)
		return False
	return pattern.match(s) is not None


def contact_profile_url(id_or_handle: str) -> str:
	"""Profile link; a handle, member id or SalesNav id all resolve through it."""
	return CONTACT_PROFILE_ROOT + id_or_handle


def organization_profile_url(id_or_handle: str) -> str:
	# /company/ also redirects to schools
	if not id_or_handle:
		return ""
	return ORGANIZATION_PROFILE_ROOT + id_or_handle


def twitter_url_builder(username: str) -> str:
	return TWITTER_ROOT + username


def extract_sales_nav_id_from_url(url: str) -> str:
	"""e.g. ACwAAAB0jjI... from https://www.linkedin.com/sales/people/ACwAAAB0jjI...,OUT_OF_NETWORK,2N7m"""
	if not url:
		return ""
	return url.split(",", 1)[0].split("/")[-1]


__all__ = [
	"linkedin_url_cleaner_err",
	"linkedin_url_cleaner",
	"is_linkedin_url",
	"url_profile_extract",
	"extract_linkedin_slug",
	"match_linkedin_url",
	"match_li_url_by_id_or_handle",
	"contact_profile_url",
	"organization_profile_url",
	"twitter_url_builder",
	"extract_sales_nav_id_from_url",
]
