import pytest
from linkcanon.core.urn import (
	URN,
	entity_urn,
	extract_sales_profile_id_from_urn,
	sales_company_url_from_urn,
	sales_profile_url_from_urn,
	urn_extractor,
)
from linkcanon.errors import EmptyURNError, InvalidURNFormatError, LinkCanonError


MALFORMED_URNS = [
	"urn:li:fs_salesProfile:(",
	"urn:li:fs_salesProfile:)",
	"urn:li:fs_salesProfile:(,)",
	"urn:li:fs_salesProfile:(,,)",
	"urn:",
	":",
	"random string",
	"urn:li:fs_salesProfile:(malformed",
	"urn:li:fs_salesProfile:)(a,b,c",
	"\x00\xff�",
]


@pytest.mark.parametrize(
	"urn,want",
	[
		("urn:li:fs_normalized_company:13205888", "13205888"),
		("urn:li:member:22719531", "22719531"),
		("", ""),
		("non-empty string without colon", "non-empty string without colon"),
		("urn:li:fs_salesProfile:(ACwAAAJlc6wBYdHGFmVJDHu,NAME_SEARCH,ij9X)", "ACwAAAJlc6wBYdHGFmVJDHu"),
		("urn:li:fs_salesProfile:( ACwAAAJlc6wBYdHGFmVJDHu , NAME_SEARCH , ij9X )", "ACwAAAJlc6wBYdHGFmVJDHu"),
		("urn:li:fs_salesProfile:(ACwAAAJlc6wBYdHGFmVJDHu)", "ACwAAAJlc6wBYdHGFmVJDHu"),
		("urn:li:fs_salesProfile:()", ""),
		("urn:li:fs_salesProfile:(ACwAAAJlc6wBYdHGFmVJDHu", "(ACwAAAJlc6wBYdHGFmVJDHu"),
	],
)
def test_urn_extractor(urn, want):
	assert urn_extractor(urn) == want


def test_entity_urn_valid():
	got = entity_urn("urn:li:fs_salesProfile:(ACwAAAKWZe8BZ8gXVKS6ePAs8I4GWmjW4Tjm-7w,NAME_SEARCH,xqt8)")
	assert got == URN(
		profile_id="ACwAAAKWZe8BZ8gXVKS6ePAs8I4GWmjW4Tjm-7w",
		auth_type="NAME_SEARCH",
		auth_token="xqt8",
	)


def test_entity_urn_empty():
	with pytest.raises(EmptyURNError) as exc:
		entity_urn("")
	assert str(exc.value) == "empty URN"


@pytest.mark.parametrize(
	"urn",
	[
		"invalid-urn",
		"urn:li:fs_salesProfile:ACwAAAKWZe8BZ8gXVKS6ePAs,NAME_SEARCH,xqt8",
		"urn:li:fs_salesProfile:(ACwAAAKWZe8BZ8gXVKS6ePAs)",
		"urn:li:fs_salesProfile:(part1,part2,part3,part4)",
		"urn:li:fs_salesProfile:()",
		"urn:li:fs_salesProfile:(ACwAAAKWZe8BZ8gXVKS6ePAs,NAME_SEARCH,xqt8",
		"urn:li:fs_salesProfile:(,,)",
		"urn:li:fs_salesProfile:(id, ,token)",
	],
)
def test_entity_urn_invalid_format(urn):
	with pytest.raises(InvalidURNFormatError) as exc:
		entity_urn(urn)
	assert str(exc.value) == "invalid URN format"


def test_entity_urn_keeps_profile_id_whitespace():
	# auth fields are stripped, the profile id is not (urn_extractor strips it)
	got = entity_urn("urn:li:fs_salesProfile:( ACwAAAJlc6wBYdHGFmVJDHu , NAME_SEARCH , ij9X )")
	assert got.profile_id == " ACwAAAJlc6wBYdHGFmVJDHu "
	assert got.auth_type == "NAME_SEARCH"
	assert got.auth_token == "ij9X"
	assert urn_extractor("urn:li:fs_salesProfile:( ACwAAAJlc6wBYdHGFmVJDHu , NAME_SEARCH , ij9X )") == "ACwAAAJlc6wBYdHGFmVJDHu"


@pytest.mark.parametrize("urn", MALFORMED_URNS)
def test_malformed_urns_only_raise_typed_errors(urn):
	assert isinstance(urn_extractor(urn), str)
	try:
		entity_urn(urn)
	except LinkCanonError:
		pass
	assert isinstance(sales_company_url_from_urn(urn), str)
	assert isinstance(sales_profile_url_from_urn(urn), str)


@pytest.mark.parametrize(
	"urn,want",
	[
		("urn:li:fs_salesCompany:34307789", "https://www.linkedin.com/sales/company/34307789"),
		("urn:li:fs_salesCompany:12345", "https://www.linkedin.com/sales/company/12345"),
		("urn:li:fs_salesCompany", ""),
		("urn:li:fs:salesCompany:34307789:extra", ""),
		("", ""),
	],
)
def test_sales_company_url_from_urn(urn, want):
	assert sales_company_url_from_urn(urn) == want


def test_extract_sales_profile_id_from_urn():
	assert extract_sales_profile_id_from_urn("urn:li:fs_salesCompany:34307789") == "34307789"
	assert extract_sales_profile_id_from_urn("urn:li:member") == ""


def test_sales_profile_url_from_urn():
	got = sales_profile_url_from_urn("urn:li:fs_salesProfile:(ACwAAAJlc6wBYdHGFmVJDHu,NAME_SEARCH,ij9X)")
	assert got == "https://www.linkedin.com/sales/people/ACwAAAJlc6wBYdHGFmVJDHu"
	assert sales_profile_url_from_urn("urn:li:member:22719531") == ""
	assert sales_profile_url_from_urn("") == ""
