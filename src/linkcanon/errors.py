# LinkCanon — Error types shared by the strict parsers
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional


class LinkCanonError(Exception):
	"""Base class for every error raised by LinkCanon."""


class EmptyInputError(LinkCanonError, ValueError):
	pass


class EmptyURLError(EmptyInputError):
	def __init__(self, message: str = "empty URL") -> None:
		super().__init__(message)


class EmptyURNError(EmptyInputError):
	def __init__(self, message: str = "empty URN") -> None:
		super().__init__(message)


class NotLinkedInURLError(LinkCanonError, ValueError):
	"""Raised by the LinkedIn cleaner. `value` holds the raw input, untouched."""

	def __init__(self, value: str, message: str = "not a LinkedIn URL") -> None:
		super().__init__(message)
		self.value = value


class InvalidURNFormatError(LinkCanonError, ValueError):
	def __init__(self, message: str = "invalid URN format") -> None:
		super().__init__(message)


class UnresolvableDomainError(LinkCanonError, ValueError):
	pass


class RedirectResolutionFailedError(LinkCanonError):
	def __init__(self, message: str, url: str = "", status_code: Optional[int] = None) -> None:
		super().__init__(message)
		self.url = url
		self.status_code = status_code


class NoRedirectsError(RedirectResolutionFailedError):
	pass


__all__ = [
	"LinkCanonError",
	"EmptyInputError",
	"EmptyURLError",
	"EmptyURNError",
	"NotLinkedInURLError",
	"InvalidURNFormatError",
	"UnresolvableDomainError",
	"RedirectResolutionFailedError",
	"NoRedirectsError",
]
