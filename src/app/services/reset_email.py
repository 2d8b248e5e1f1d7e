"""
Password reset email rendering.

The HTML template lives in src/app/templates and is loaded through a
single Jinja2 environment created on first use.
"""

from functools import lru_cache
from pathlib import Path
from typing import Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape
from user_agents import parse as parse_user_agent

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
RESET_PASSWORD_TEMPLATE = "reset_password.html"
RESET_PASSWORD_SUBJECT = "Password Reset Request"


@lru_cache(maxsize=1)
def get_template_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
    )


def describe_user_agent(user_agent: str) -> Tuple[str, str]:
    """Return ("<browser> <version>", "<os> <version>") for a User-Agent header."""
    ua = parse_user_agent(user_agent or "")
    browser = f"{ua.browser.family} {ua.browser.version_string}".strip()
    operating_system = f"{ua.os.family} {ua.os.version_string}".strip()
    return browser, operating_system


def render_reset_email(username: str, otp: str, user_agent: str) -> str:
    browser, operating_system = describe_user_agent(user_agent)
    template = get_template_environment().get_template(RESET_PASSWORD_TEMPLATE)
    return template.render(
        username=username,
        OTP=otp,
        operatingSystem=operating_system,
        browser=browser,
    )
