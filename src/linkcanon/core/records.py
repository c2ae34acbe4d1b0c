# LinkCanon — Filtering CRM records by LinkedIn URL identity
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import List, Protocol, Sequence, TypeVar

from ..utils.urls import extract_host_and_path
from .linkedin import linkedin_url_cleaner


class LinkedinURLGetter(Protocol):
	def get_linkedin_url(self, key: str) -> str:
		...


T = TypeVar("T", bound=LinkedinURLGetter)


def remove_with_empty_or_not_equal_linkedin_url(entities: Sequence[T], key: str, linkedin_url: str) -> List[T]:
	"""Drop entities whose LinkedIn URL points somewhere other than linkedin_url.

	Entities without a usable LinkedIn URL are kept. If linkedin_url itself is not
	a LinkedIn URL nothing is filtered.
	"""
	clean = linkedin_url_cleaner(linkedin_url)
	if clean == "":
		return list(entities)

	wanted = extract_host_and_path(clean)
	remaining: List[T] = []
	for e in entities:
		crm_clean = linkedin_url_cleaner(e.get_linkedin_url(key))
		if crm_clean == "" or extract_host_and_path(crm_clean) == wanted:
			remaining.append(e)
	return remaining


__all__ = ["LinkedinURLGetter", "remove_with_empty_or_not_equal_linkedin_url"]
