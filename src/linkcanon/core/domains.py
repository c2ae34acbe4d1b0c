# LinkCanon — Registrable domain (eTLD+1) extraction with denylist filtering
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import functools
import logging
from typing import Optional
from urllib.parse import urlsplit

import requests
import tldextract

from ..config import settings
from ..errors import (
	EmptyURLError,
	LinkCanonError,
	NoRedirectsError,
	RedirectResolutionFailedError,
	UnresolvableDomainError,
)
from ..utils.net import build_session
from ..utils.urls import WEB_SCHEME_RE
from .publicdomains import KNOWN_DOMAINS, is_public_domain, is_url_shortener_domain


logger = logging.getLogger(__name__)

CLEARBIT_LOGO_URL = "https://logo.clearbit.com/"


@functools.lru_cache(maxsize=1)
def get_extractor() -> tldextract.TLDExtract:
	"""Shared TLDExtract; with no suffix_list_urls configured it only reads the bundled snapshot."""
	return tldextract.TLDExtract(
		suffix_list_urls=tuple(settings.suffix_list_urls),
		include_psl_private_domains=settings.include_psl_private_domains,
	)


@functools.lru_cache(maxsize=1)
def get_session() -> requests.Session:
	return build_session(
		user_agent=settings.user_agent,
		retries=settings.http_retries,
		backoff=settings.http_backoff,
	)


def _hostname(s: str) -> str:
	"""Lower-cased host of s; schemeless input is read as an authority (//host/path)."""
	s = s.lower()
	if not WEB_SCHEME_RE.match(s):
		s = "//" + s  # URL needs to be prefixed with // to be parseable
	try:
		return urlsplit(s).hostname or ""
	except ValueError as e:
		raise UnresolvableDomainError(f"parse domain from URL: {e}") from e


def domain_from_url_no_filtering(s: str) -> str:
	"""Registrable domain of s, e.g. https://app.some.co.uk -> some.co.uk.

	When no eTLD+1 can be derived (unknown or missing suffix) a host containing
	a dot is accepted as-is, so internal TLDs still resolve.

	Raises EmptyURLError or UnresolvableDomainError.
	"""
	if s == "":
		raise EmptyURLError()

	host = _hostname(s)
	if not host:
		raise UnresolvableDomainError(f"parse domain from URL: no host in {s!r}")

	ext = get_extractor()(host)
	if not ext.domain or not ext.suffix:
		if "." in host:
			return host
		raise UnresolvableDomainError(f"parse domain from URL: cannot derive eTLD+1 for {host!r}")

	return ext.domain + "." + ext.suffix


def subdomain_with_domain_from_url(s: str) -> str:
	"""Like domain_from_url_no_filtering but keeps any subdomain other than www."""
	if s == "":
		raise EmptyURLError()

	host = _hostname(s)
	ext = get_extractor()(host) if host else None
	if ext is None or not ext.domain or not ext.suffix:
		raise UnresolvableDomainError(f"empty domain and TLD for {s!r}")

	if not ext.subdomain or ext.subdomain == "www":
		return f"{ext.domain}.{ext.suffix}"
	return f"{ext.subdomain}.{ext.domain}.{ext.suffix}"


def get_redirected_domain(url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> str:
	"""Domain of the first redirect hop of url (HEAD, redirects not followed).

	Raises RedirectResolutionFailedError; NoRedirectsError when url does not redirect.
	"""
	s = session or get_session()
	try:
		r = s.head(url, allow_redirects=False, timeout=timeout if timeout is not None else settings.http_timeout)
	except requests.RequestException as e:
		raise RedirectResolutionFailedError(f"failed to get redirection URL for {url}: {e}", url=url) from e

	try:
		status = r.status_code
		location = r.headers.get("Location", "")
	finally:
		r.close()

	if status < 300 or status >= 400:
		raise NoRedirectsError(f"no redirection found for {url} with status code: {status}", url=url, status_code=status)
	if not location:
		raise NoRedirectsError(f"no Location header for {url} with status code: {status}", url=url, status_code=status)

	try:
		return domain_from_url_no_filtering(location)
	except LinkCanonError as e:
		raise RedirectResolutionFailedError(f"failed to get domain from URL {location}: {e}", url=url, status_code=status) from e


def get_redirected_domain_from_domain(domain: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> str:
	domain = domain_from_url_no_filtering(domain)
	if not domain.startswith("http"):
		domain = "https://" + domain
	return get_redirected_domain(domain, session=session, timeout=timeout)


def domain_from_url(s: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> str:
	"""Registrable domain useful as an organization identifier, or "".

	Shortened links are resolved one hop (best effort), public platforms are
	dropped and a few known domains are remapped. Never raises.
	"""
	if s.strip() == "":
		return ""

	try:
		domain = domain_from_url_no_filtering(s)
	except EmptyURLError:
		return ""
	except LinkCanonError as e:
		logger.info("domain_from_url_no_filtering failed for %s: %s", s, e)
		return ""

	if is_url_shortener_domain(domain):
		target = s if WEB_SCHEME_RE.match(s.lower()) else "https://" + s.strip()
		try:
			domain = get_redirected_domain(target, session=session, timeout=timeout)
		except RedirectResolutionFailedError as e:
			logger.error("get_redirected_domain failed for %s: %s", s, e)

	if is_public_domain(domain):
		return ""

	return KNOWN_DOMAINS.get(domain, domain)


def same_domains(linkedin_domain: str, crm_domain: str) -> bool:
	if not linkedin_domain or not crm_domain:
		return False

	v = domain_from_url(crm_domain)
	if v:
		return v.lower() == linkedin_domain.lower()
	return crm_domain.lower() == linkedin_domain.lower()


def domain_from_email(email: str) -> str:
	parts = email.split("@")
	if len(parts) != 2:
		return ""
	return parts[1]


def get_clearbit_url(url: str) -> str:
	try:
		domain = domain_from_url_no_filtering(url)
	except LinkCanonError:
		return ""
	return CLEARBIT_LOGO_URL + domain


__all__ = [
	"get_extractor",
	"domain_from_url_no_filtering",
	"subdomain_with_domain_from_url",
	"get_redirected_domain",
	"get_redirected_domain_from_domain",
	"domain_from_url",
	"same_domains",
	"domain_from_email",
	"get_clearbit_url",
]
