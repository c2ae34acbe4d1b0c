# LinkCanon — LinkedIn URN parsing
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from dataclasses import dataclass

from ..errors import EmptyURNError, InvalidURNFormatError


# urn:li:fs_salesProfile:(ACwAAAJlc6wBYdHGFmVJDHu,NAME_SEARCH,ij9X)
PAREN_GROUP_RE = re.compile(r"\((.*?)\)")

SALES_PEOPLE_ROOT = "https://www.linkedin.com/sales/people"
SALES_COMPANY_ROOT = "https://www.linkedin.com/sales/company"


@dataclass(frozen=True)
class URN:
	profile_id: str
	auth_type: str
	auth_token: str


def urn_extractor(urn: str) -> str:
	"""Extract the id from a URN, never raising.

	urn:li:fs_normalized_company:13205888 -> 13205888
	urn:li:fs_salesProfile:(ACwAAAJlc6wBYdHGFmVJDHu,NAME_SEARCH,ij9X) -> ACwAAAJlc6wBYdHGFmVJDHu
	Unbalanced parentheses fall back to the last colon segment.
	"""
	last_segment = urn.split(":")[-1]
	m = PAREN_GROUP_RE.search(last_segment)
	if not m:
		return last_segment
	return m.group(1).split(",")[0].strip()


def entity_urn(urn: str) -> URN:
	"""Parse urn:li:<type>:(<profile id>,<auth type>,<auth token>) into a URN.

	auth_type and auth_token are stripped; profile_id is kept exactly as written.
	Raises EmptyURNError or InvalidURNFormatError.
	"""
	if urn == "":
		raise EmptyURNError()

	last_segment = urn.split(":")[-1]
	m = PAREN_GROUP_RE.search(last_segment)
	if not m:
		raise InvalidURNFormatError()

	parts = m.group(1).split(",")
	if len(parts) != 3 or any(not p.strip() for p in parts):
		raise InvalidURNFormatError()

	return URN(profile_id=parts[0], auth_type=parts[1].strip(), auth_token=parts[2].strip())


def extract_sales_profile_id_from_urn(urn: str) -> str:
	"""e.g. 34307789 from urn:li:fs_salesCompany:34307789; "" unless there are exactly 4 segments."""
	parts = urn.split(":")
	if len(parts) != 4:
		return ""
	return parts[3]


def sales_company_url_from_urn(urn: str) -> str:
	company_id = extract_sales_profile_id_from_urn(urn)
	if not company_id:
		return ""
	return SALES_COMPANY_ROOT + "/" + company_id


def sales_profile_url_from_urn(urn: str) -> str:
	try:
		parsed = entity_urn(urn)
	except (EmptyURNError, InvalidURNFormatError):
		return ""
	return SALES_PEOPLE_ROOT + "/" + parsed.profile_id


__all__ = [
	"URN",
	"urn_extractor",
	"entity_urn",
	"extract_sales_profile_id_from_urn",
	"sales_company_url_from_urn",
	"sales_profile_url_from_urn",
]
