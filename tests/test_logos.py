import pytest

from billtracker.logos import CATEGORY_ICONS, company_domain, fallback_icon, logo_url
from billtracker.models import CATEGORIES


@pytest.mark.parametrize("name, domain", [
    ("Verizon Wireless", "verizon.com"),
    ("AT&T Fiber", "att.com"),
    ("T-Mobile", "t-mobile.com"),
    ("Capital One Venture", "capitalone.com"),
    ("AMEX Gold", "americanexpress.com"),
    ("Duke Energy", "duke-energy.com"),
    ("Apple Music", "apple.com"),
    ("Amazon Prime", "amazon.com"),
    ("State Farm Auto", "statefarm.com"),
    ("Zoom Pro", "zoom.us"),
])
def test_known_companies(name, domain):
    assert company_domain(name) == domain


def test_compound_rules_need_every_part():
    assert company_domain("Apple Store") is None
    assert company_domain("Amazon Fresh") is None
    assert company_domain("Max TV") == "max.com"


def test_first_match_wins():
    # "xfinity by comcast" hits the xfinity rule, which comes first
    assert company_domain("Xfinity by Comcast") == "xfinity.com"


def test_logo_url():
    assert logo_url("netflix") == "https://logo.clearbit.com/netflix.com"
    assert logo_url("Landlord") is None


@pytest.mark.parametrize("name, category, icon", [
    ("Anything", "Phone/Internet", "📱"),
    ("Visa credit", "Other", "💳"),
    ("City water", "Other", "⚡"),
    ("Auto", "Insurance", "🛡️"),
    ("Streaming bundle", "Other", "📺"),
    ("Mortgage", "Other", "🏠"),
    ("Student loan", "Other", "🏦"),
    ("Misc", "Other", "📄"),
])
def test_fallback_icon(name, category, icon):
    assert fallback_icon(name, category) == icon


def test_every_category_has_an_icon():
    assert set(CATEGORY_ICONS) == set(CATEGORIES)
