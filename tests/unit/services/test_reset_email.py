from src.app.services.reset_email import (
    describe_user_agent,
    get_template_environment,
    render_reset_email,
)

CHROME_ON_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
FIREFOX_ON_LINUX = (
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"
)


def test_describe_chrome_on_windows():
    browser, operating_system = describe_user_agent(CHROME_ON_WINDOWS)

    assert browser.startswith("Chrome 120")
    assert operating_system.startswith("Windows")


def test_describe_firefox_on_linux():
    browser, operating_system = describe_user_agent(FIREFOX_ON_LINUX)

    assert browser.startswith("Firefox 121")
    assert "Ubuntu" in operating_system or "Linux" in operating_system


def test_describe_missing_user_agent():
    browser, operating_system = describe_user_agent("")

    assert browser == "Other"
    assert operating_system == "Other"


def test_render_substitutes_every_placeholder():
    html = render_reset_email("alice", "483920", CHROME_ON_WINDOWS)

    assert "Hi alice," in html
    assert ">483920</p>" in html
    assert "Chrome" in html
    assert "Windows" in html
    assert "{{" not in html


def test_render_escapes_username():
    html = render_reset_email("<b>alice</b>", "483920", "")

    assert "<b>alice</b>" not in html
    assert "&lt;b&gt;alice&lt;/b&gt;" in html


def test_template_environment_is_shared():
    assert get_template_environment() is get_template_environment()
