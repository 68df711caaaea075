"""Company logo and icon lookup for bill names.

Each rule is ``(any_of, all_of, domain)``: the lower-cased bill name must
contain at least one ``any_of`` substring and, when ``all_of`` is non-empty,
at least one of those too. Rules are tried in order, first match wins.
"""
from typing import Optional, Sequence, Tuple

from .config import LOGO_BASE_URL
from .models import Category

Rule = Tuple[Sequence[str], Sequence[str], str]

LOGO_RULES: Sequence[Rule] = (
    # Telecom / Internet
    (("verizon",), (), "verizon.com"),
    (("att", "at&t"), (), "att.com"),
    (("tmobile", "t-mobile"), (), "t-mobile.com"),
    (("sprint",), (), "sprint.com"),
    (("xfinity",), (), "xfinity.com"),
    (("comcast",), (), "comcast.com"),
    (("spectrum",), (), "spectrum.com"),
    (("charter",), (), "charter.com"),
    (("cox",), (), "cox.com"),
    (("optimum",), (), "optimum.com"),
    (("altice",), (), "alticeusa.com"),
    # Credit cards / banks
    (("chase",), (), "chase.com"),
    (("discover",), (), "discover.com"),
    (("capital one", "capitalone"), (), "capitalone.com"),
    (("american express", "amex"), (), "americanexpress.com"),
    (("citi", "citibank"), (), "citibank.com"),
    (("wells fargo", "wellsfargo"), (), "wellsfargo.com"),
    (("bank of america", "boa"), (), "bankofamerica.com"),
    (("usaa",), (), "usaa.com"),
    (("navy federal",), (), "navyfederal.org"),
    # Utilities
    (("pge", "pacific gas"), (), "pge.com"),
    (("edison", "sce"), (), "sce.com"),
    (("duke energy",), (), "duke-energy.com"),
    (("georgia power",), (), "georgiapower.com"),
    (("pepco",), (), "pepco.com"),
    (("sdge",), (), "sdge.com"),
    (("con ed", "coned"), (), "coned.com"),
    # Streaming / subscriptions
    (("netflix",), (), "netflix.com"),
    (("spotify",), (), "spotify.com"),
    (("apple",), ("music", "tv", "icloud"), "apple.com"),
    (("amazon",), ("prime",), "amazon.com"),
    (("disney",), (), "disney.com"),
    (("hulu",), (), "hulu.com"),
    (("hbo",), (), "hbo.com"),
    (("max",), ("streaming", "tv"), "max.com"),
    (("youtube",), (), "youtube.com"),
    (("twitch",), (), "twitch.tv"),
    (("paramount",), (), "paramount.com"),
    (("peacock",), (), "peacocktv.com"),
    # Insurance
    (("geico",), (), "geico.com"),
    (("state farm",), (), "statefarm.com"),
    (("allstate",), (), "allstate.com"),
    (("progressive",), (), "progressive.com"),
    (("farmers",), (), "farmers.com"),
    (("liberty mutual",), (), "libertymutual.com"),
    # Software and retail
    (("microsoft",), (), "microsoft.com"),
    (("google",), (), "google.com"),
    (("adobe",), (), "adobe.com"),
    (("dropbox",), (), "dropbox.com"),
    (("slack",), (), "slack.com"),
    (("zoom",), (), "zoom.us"),
    (("bestbuy", "best buy"), (), "bestbuy.com"),
)

CATEGORY_ICONS = {
    Category.UTILITIES.value: "⚡",
    Category.RENT.value: "🏠",
    Category.INSURANCE.value: "🛡️",
    Category.SUBSCRIPTIONS.value: "📱",
    Category.PHONE.value: "📡",
    Category.CREDIT_CARDS.value: "💳",
    Category.LOANS.value: "🏦",
    Category.OTHER.value: "📋",
}

# (category, name keywords, icon), checked in order
FALLBACK_ICONS = (
    (Category.PHONE.value, ("phone", "internet"), "📱"),
    (Category.CREDIT_CARDS.value, ("credit", "card"), "💳"),
    (Category.UTILITIES.value, ("electric", "gas", "water"), "⚡"),
    (Category.INSURANCE.value, ("insurance",), "🛡️"),
    (Category.SUBSCRIPTIONS.value, ("subscription", "streaming"), "📺"),
    (Category.RENT.value, ("rent", "mortgage"), "🏠"),
    (Category.LOANS.value, ("loan",), "🏦"),
)
DEFAULT_ICON = "📄"


def company_domain(bill_name: str) -> Optional[str]:
    name = bill_name.lower()
    for any_of, all_of, domain in LOGO_RULES:
        if any(p in name for p in any_of) and (not all_of or any(p in name for p in all_of)):
            return domain
    return None


def logo_url(bill_name: str) -> Optional[str]:
    domain = company_domain(bill_name)
    if domain:
        return f"{LOGO_BASE_URL}/{domain}"
    return None


def fallback_icon(bill_name: str, category: str) -> str:
    """Icon shown when there is no logo or the image fails to load."""
    name = bill_name.lower()
    for cat, keywords, icon in FALLBACK_ICONS:
        if category == cat or any(k in name for k in keywords):
            return icon
    return DEFAULT_ICON
