# LinkCanon — Static domain tables: public platforms, URL shorteners, remaps
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Dict, FrozenSet


WEBSITE_BUILDERS = (
	"zohosites.com",
	"weebly.com",
	"governor.io",
	"sitebuilder.com",
	"blogger.com",
	"jimbo.com",
	"site123.com",
	"doodlekit.com",
	"wordpress.com",
	"wix.com",
	"wix.net",
	"squarespace.com",
	"godaddy.com",
)

SOCIAL_MEDIA_DOMAINS = (
	"facebook.com",
	"twitter.com",
	"instagram.com",
	"whatsapp.com",
	"tiktok.com",
	"reddit.com",
	"linkedin.com",
	"linktr.ee",
	"vk.com",
	"discord.com",
	"pinterest.com",
	"ok.ru",
	"zhihu.com",
	"messenger.com",
	"line.me",
	"telegram.org",
	"tumblr.com",
	"namu.wiki",
	"nextdoor.com",
	"ameblo.jp",
	"weibo.com",
	"ppgames.net",
	"redd.it",
	"slack.com",
	"zalo.me",
	"patreon.com",
	"livejournal.com",
	"slideshare.net",
	"snapchat.com",
	"discordapp.com",
	"hatenablog.com",
	"hczog.com",
	"omegle.com",
	"fb.com",
	"pinterest.es",
	"snaptik.app",
	"ssstik.io",
	"gotrackier.com",
	"bakusai.com",
	"pinterest.com.mx",
	"51dongshi.com",
	"ptt.cc",
	"fb.watch",
	"pinterest.co.uk",
	"kwai.com",
	"pinterest.fr",
	"ninisite.com",
	"bp.blogspot.com",
	"dcard.tw",
	"youtubekids.com",
	"ameba.jp",
)

PUBLIC_DOMAINS: FrozenSet[str] = frozenset(d.lower() for d in WEBSITE_BUILDERS + SOCIAL_MEDIA_DOMAINS)

URL_SHORTENER_DOMAINS: FrozenSet[str] = frozenset(
	{
		"bit.ly",
		"bitly.com",
		"tinyurl.com",
		"t.co",
		"goo.gl",
		"ow.ly",
		"is.gd",
		"v.gd",
		"buff.ly",
		"rebrand.ly",
		"cutt.ly",
		"shorturl.at",
		"tiny.cc",
		"bl.ink",
		"rb.gy",
		"t.ly",
		"s.id",
		"lnkd.in",
		"short.io",
		"soo.gd",
		"clck.ru",
		"shorte.st",
		"adf.ly",
		"bit.do",
		"mcaf.ee",
		"su.pr",
		"qr.net",
		"1url.com",
		"tr.im",
		"x.co",
	}
)

# Domains whose registrable form is not the name we want to surface
KNOWN_DOMAINS: Dict[str, str] = {
	"goo.gle": "google",
}


def is_public_domain(domain: str) -> bool:
	"""Known social media or website builder domain (case-insensitive)."""
	return domain.lower() in PUBLIC_DOMAINS


def is_url_shortener_domain(domain: str) -> bool:
	return domain.lower() in URL_SHORTENER_DOMAINS


__all__ = [
	"PUBLIC_DOMAINS",
	"URL_SHORTENER_DOMAINS",
	"KNOWN_DOMAINS",
	"is_public_domain",
	"is_url_shortener_domain",
]
