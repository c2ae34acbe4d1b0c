import pytest
from linkcanon.utils.urls import (
	domain_name_without_tld,
	extract_host_and_path,
	format_domain_url,
	generate_url_combinations,
	remove_query_params,
	url_hostname_extractor,
)


@pytest.mark.parametrize(
	"url,want",
	[
		("https://www.linkedin.com/company/surfe/", "linkedin.com/company/surfe"),
		("https://linkedin.com/company/surfe/", "linkedin.com/company/surfe"),
		("http://www.linkedin.com/company/surfe/", "linkedin.com/company/surfe"),
		("http://linkedin.com/company/surfe", "linkedin.com/company/surfe"),
		("www.linkedin.com/company/surfe/", "www.linkedin.com/company/surfe"),
		("linkedin.com/company/surfe/", "linkedin.com/company/surfe"),
		(":/linkedin.com/company/surfe/", ":/linkedin.com/company/surfe"),
		("this is not an URL", "this is not an URL"),
		("", ""),
		("https://www.surfe.com/a?x=1#frag", "surfe.com/a"),
		("https://user@www.surfe.com/a", "surfe.com/a"),
		("http://[::1/oops/", "http://[::1/oops"),
		("https://www.linkedin.com/in/jo\nhn/", "https://www.linkedin.com/in/jo\nhn"),
		("https://www.surfe.com/a\tb", "https://www.surfe.com/a\tb"),
	],
)
def test_extract_host_and_path(url, want):
	assert extract_host_and_path(url) == want


def test_extract_host_and_path_keeps_case_but_drops_any_www():
	assert extract_host_and_path("https://WWW.Linkedin.com/company/surfe/") == "Linkedin.com/company/surfe"
	assert extract_host_and_path("https://www.linkedin.com/in/JohnDoe") == "linkedin.com/in/JohnDoe"


@pytest.mark.parametrize(
	"url",
	[
		"https://www.linkedin.com/company/surfe/",
		"http://linkedin.com/in/jude-don",
		"https://surfe.com",
	],
)
def test_extract_host_and_path_idempotent(url):
	key = extract_host_and_path(url)
	for prefix in ("https://", "http://", "https://www.", "http://www."):
		assert extract_host_and_path(prefix + key) == key
		assert extract_host_and_path(prefix + key + "/") == key


def test_generate_url_combinations_order():
	assert generate_url_combinations("https://www.linkedin.com/company/surfe/") == [
		"https://www.linkedin.com/company/surfe/",
		"http://www.linkedin.com/company/surfe/",
		"https://linkedin.com/company/surfe/",
		"http://linkedin.com/company/surfe/",
		"https://www.linkedin.com/company/surfe",
		"http://www.linkedin.com/company/surfe",
		"https://linkedin.com/company/surfe",
		"http://linkedin.com/company/surfe",
	]


def test_generate_url_combinations_any_string():
	combos = generate_url_combinations("any string")
	assert len(combos) == 8
	assert combos[0] == "https://www.any string/"
	assert combos[-1] == "http://any string"


def test_generate_url_combinations_empty():
	assert generate_url_combinations("") == []


def test_generate_url_combinations_round_trip():
	url = "http://linkedin.com/company/allbirds/"
	key = extract_host_and_path(url)
	combos = generate_url_combinations(url)
	assert len(set(combos)) == 8
	assert all(extract_host_and_path(c) == key for c in combos)


@pytest.mark.parametrize(
	"url,want",
	[
		("https://www.surfe.com", "surfe.com"),
		("http://www.surfe.com", "surfe.com"),
		("www.surfe.com", "surfe.com"),
		("https://surfe.com", "surfe.com"),
		("http://surfe.com/test", "surfe.com"),
		("http://surfe.com/", "surfe.com"),
		("", ""),
	],
)
def test_url_hostname_extractor(url, want):
	assert url_hostname_extractor(url) == want


@pytest.mark.parametrize(
	"url,want",
	[
		("https://leadjet.io/", "leadjet.io"),
		("http://surfe.com", "surfe.com"),
		("https://www.surfe.com", "www.surfe.com"),
		("gelsenwasser.de", "gelsenwasser.de"),
		("xxxx", "xxxx"),
	],
)
def test_format_domain_url(url, want):
	assert format_domain_url(url) == want


def test_domain_name_without_tld():
	assert domain_name_without_tld("https://www.surfe.com/some-path") == "surfe"
	assert domain_name_without_tld("leadjet.io") == "leadjet"
	assert domain_name_without_tld("localhost") == "localhost"


@pytest.mark.parametrize(
	"url,want",
	[
		("https://www.surfe.com", "https://www.surfe.com"),
		("https://www.surfe.com/", "https://www.surfe.com"),
		("https://www.surfe.com?utm_source=linkedin&utm_medium=companypage", "https://www.surfe.com"),
		("http://www.surfe.com/?utm_source=linkedin", "http://www.surfe.com"),
		("xxxx", "xxxx"),
	],
)
def test_remove_query_params(url, want):
	assert remove_query_params(url) == want
