"""HTML rendering for the public landing page.

Every user-facing label is resolved through ``LanguageState.t()``; the
``<html>`` element carries the state's document ``lang``/``dir`` so the
browser handles bidi layout natively.  Section order follows the site:
nav, hero, about, services, how-we-work, why-us, portfolio, packages,
booking, footer.
"""

from __future__ import annotations

from datetime import date
from html import escape
from urllib.parse import quote

from app.core.config import Settings
from app.i18n import LANGUAGES
from app.i18n.bidi import mirror, script_class
from app.i18n.state import LanguageState

# (anchor, label key) pairs shared by the navbar and the footer.
NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("/", "nav.home"),
    ("/#about", "nav.about"),
    ("/#services", "nav.services"),
    ("/#portfolio", "nav.portfolio"),
    ("/#packages", "nav.packages"),
    ("/#booking", "nav.booking"),
)

ABOUT_STATS: tuple[tuple[str, str], ...] = (
    ("3+", "about.experience"),
    ("50+", "about.projects"),
    ("30+", "about.clients"),
    ("24/7", "about.support"),
)

SERVICES: tuple[str, ...] = ("uiux", "web", "mobile", "seo")

WHY_US_FEATURES = 4
WHY_US_BENEFITS = 6

# (project title key, category key); categories reuse service titles where they match.
PORTFOLIO_PROJECTS: tuple[tuple[str, str], ...] = (
    ("portfolio.project1.title", "services.web.title"),
    ("portfolio.project2.title", "services.mobile.title"),
    ("portfolio.project3.title", "services.uiux.title"),
    ("portfolio.project4.title", "services.web.title"),
    ("portfolio.project5.title", "services.mobile.title"),
    ("portfolio.project6.title", "portfolio.category.fullStack"),
)

BOOKING_FIELDS: tuple[str, ...] = (
    "booking.form.name",
    "booking.form.email",
    "booking.form.phone",
    "booking.form.service",
    "booking.form.date",
    "booking.form.time",
    "booking.form.message",
)


def _text(state: LanguageState, key: str) -> str:
    return escape(state.t(key))


def _heading(state: LanguageState, tag: str, key: str) -> str:
    cls = script_class(state.direction, heading=True)
    attr = f' class="{cls}"' if cls else ""
    return f"<{tag}{attr}>{_text(state, key)}</{tag}>"


def _paragraph(state: LanguageState, key: str) -> str:
    cls = script_class(state.direction)
    attr = f' class="{cls}"' if cls else ""
    return f"<p{attr}>{_text(state, key)}</p>"


def _section_header(state: LanguageState, badge: str, title: str, subtitle: str) -> list[str]:
    return [
        f'<span class="badge">{_text(state, badge)}</span>',
        _heading(state, "h2", title),
        _paragraph(state, subtitle),
    ]


def _other_language(state: LanguageState) -> str:
    idx = LANGUAGES.index(state.language)
    return LANGUAGES[(idx + 1) % len(LANGUAGES)]


def render_nav(state: LanguageState, next_path: str = "/") -> str:
    """Navbar with section links and the language toggle."""
    links = "".join(
        f'<a href="{href}">{_text(state, key)}</a>' for href, key in NAV_LINKS
    )
    # The toggle sits on the trailing edge in both directions.
    edge = mirror(state.direction, "right", "left")
    target = escape(quote(next_path, safe="/"))
    toggle = (
        f'<a class="lang-toggle {edge}" href="/lang/toggle?next={target}" '
        f'hreflang="{escape(_other_language(state))}">{_text(state, "language.toggle")}</a>'
    )
    return f"<nav>{links}{toggle}</nav>"


def render_hero(state: LanguageState) -> str:
    cls = script_class(state.direction, heading=True)
    attr = f' class="{cls}"' if cls else ""
    return (
        '<section id="hero">'
        f"<h1{attr}>"
        f'{_text(state, "hero.title")} <span class="highlight">{_text(state, "hero.title.highlight")}</span>'
        "</h1>"
        f"{_paragraph(state, 'hero.subtitle')}"
        f'<a class="cta" href="/#booking">{_text(state, "hero.cta")}</a>'
        f'<a href="/#portfolio">{_text(state, "hero.secondary")}</a>'
        "</section>"
    )


def render_about(state: LanguageState) -> str:
    stats = "".join(
        f'<li><strong dir="ltr">{escape(value)}</strong> {_text(state, key)}</li>'
        for value, key in ABOUT_STATS
    )
    return (
        '<section id="about">'
        + "".join(_section_header(state, "about.subtitle", "about.title", "about.description"))
        + f"<ul>{stats}</ul></section>"
    )


def render_services(state: LanguageState) -> str:
    cards = "".join(
        "<article>"
        + _heading(state, "h3", f"services.{name}.title")
        + _paragraph(state, f"services.{name}.description")
        + "</article>"
        for name in SERVICES
    )
    return (
        '<section id="services">'
        f'<span class="badge">{_text(state, "services.subtitle")}</span>'
        + _heading(state, "h2", "services.title")
        + cards
        + "</section>"
    )


def render_how_we_work(state: LanguageState) -> str:
    steps = "".join(
        "<li>"
        + _heading(state, "h3", f"howWeWork.step{n}.title")
        + _paragraph(state, f"howWeWork.step{n}.desc")
        + "</li>"
        for n in range(1, 5)
    )
    return (
        '<section id="how-we-work">'
        + "".join(_section_header(state, "howWeWork.badge", "howWeWork.title", "howWeWork.subtitle"))
        + f"<ol>{steps}</ol>"
        + _paragraph(state, "howWeWork.support")
        + "</section>"
    )


def render_why_us(state: LanguageState) -> str:
    features = "".join(
        "<article>"
        + _heading(state, "h3", f"whyUs.feature{n}.title")
        + _paragraph(state, f"whyUs.feature{n}.desc")
        + "</article>"
        for n in range(1, WHY_US_FEATURES + 1)
    )
    benefits = "".join(
        f"<li>{_text(state, f'whyUs.benefit{n}')}</li>" for n in range(1, WHY_US_BENEFITS + 1)
    )
    return (
        '<section id="why-us">'
        + "".join(_section_header(state, "whyUs.badge", "whyUs.title", "whyUs.subtitle"))
        + features
        + _heading(state, "h3", "whyUs.whatYouGet")
        + _paragraph(state, "whyUs.everythingYouNeed")
        + f"<ul>{benefits}</ul>"
        + f'<a class="cta" href="/#booking">{_text(state, "whyUs.cta")}</a>'
        + "</section>"
    )


def render_portfolio(state: LanguageState) -> str:
    cards = "".join(
        "<article>"
        f'<span class="category">{_text(state, category)}</span>'
        + _heading(state, "h3", title)
        + f'<a href="#">{_text(state, "portfolio.viewProject")}</a>'
        + "</article>"
        for title, category in PORTFOLIO_PROJECTS
    )
    return (
        '<section id="portfolio">'
        f'<span class="badge">{_text(state, "portfolio.subtitle")}</span>'
        + _heading(state, "h2", "portfolio.title")
        + cards
        + "</section>"
    )


def render_packages(state: LanguageState) -> str:
    return (
        '<section id="packages">'
        + "".join(_section_header(state, "packages.badge", "packages.title", "packages.subtitle"))
        + _paragraph(state, "packages.note")
        + "</section>"
    )


def render_booking(state: LanguageState, settings: Settings) -> str:
    fields = "".join(f"<label>{_text(state, key)}</label>" for key in BOOKING_FIELDS)
    return (
        '<section id="booking">'
        + "".join(_section_header(state, "booking.subtitle", "booking.title", "booking.description"))
        + "<dl>"
        f'<dt>{_text(state, "booking.contact.email")}</dt><dd dir="ltr">{escape(settings.CONTACT_EMAIL)}</dd>'
        f'<dt>{_text(state, "booking.contact.phone")}</dt><dd dir="ltr">{escape(settings.CONTACT_PHONE)}</dd>'
        "</dl>"
        f"<form>{fields}"
        f'<button type="submit">{_text(state, "booking.form.submit")}</button>'
        "</form></section>"
    )


def render_footer(state: LanguageState, settings: Settings, today: date | None = None) -> str:
    year = (today or date.today()).year
    links = "".join(
        f'<li><a href="{href}">{_text(state, key)}</a></li>' for href, key in NAV_LINKS[:4]
    )
    rights = state.t("footer.rights").format(year=year, name=settings.SITE_NAME)
    return (
        "<footer>"
        + _paragraph(state, "footer.description")
        + _heading(state, "h4", "footer.quickLinks")
        + f"<ul>{links}</ul>"
        + _heading(state, "h4", "footer.contact")
        + f'<p dir="ltr">{escape(settings.CONTACT_EMAIL)}</p>'
        + f"<p>{escape(rights)}</p>"
        + f'<a href="/privacy">{_text(state, "footer.privacy")}</a>'
        + f'<a href="/terms">{_text(state, "footer.terms")}</a>'
        + "</footer>"
    )


def render_landing(state: LanguageState, settings: Settings, today: date | None = None) -> str:
    """Full landing page document for the visitor's active language."""
    doc = state.document
    body = "".join(
        [
            render_nav(state),
            "<main>",
            render_hero(state),
            render_about(state),
            render_services(state),
            render_how_we_work(state),
            render_why_us(state),
            render_portfolio(state),
            render_packages(state),
            render_booking(state, settings),
            "</main>",
            render_footer(state, settings, today),
        ]
    )
    return (
        "<!DOCTYPE html>"
        f'<html lang="{escape(doc.lang)}" dir="{escape(doc.dir)}">'
        '<head><meta charset="utf-8">'
        f"<title>{escape(settings.SITE_NAME)}</title></head>"
        f"<body>{body}</body></html>"
    )
