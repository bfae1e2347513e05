"""Test the picker template loader."""

import pytest
from slides_tools.templates import (
    get_template,
    list_available_templates,
    render_template,
    validate_template,
)

CONTEXT = {
    "client_id": "1-x.apps.googleusercontent.com",
    "api_key": None,
    "app_id": "1",
    "access_token": "tok",
    "callback_url": "http://127.0.0.1:1083/",
}


def test_get_template_picker():
    template = get_template("picker")
    html = template.render(**CONTEXT)

    assert isinstance(html, str)
    assert "<html>" in html
    assert '"tok"' in html
    assert '"http://127.0.0.1:1083/"' in html
    assert "const API_KEY = null;" in html


def test_render_requires_every_value():
    with pytest.raises(ValueError, match="access_token"):
        render_template("picker", client_id="x")


def test_values_are_escaped_for_script():
    html = render_template("picker", **{**CONTEXT, "access_token": "</script><b>"})
    assert "</script><b>" not in html


def test_get_template_invalid():
    with pytest.raises(FileNotFoundError):
        get_template("nonexistent")
    with pytest.raises(ValueError):
        get_template("../evil")
    with pytest.raises(ValueError):
        get_template("picker/../../evil")


def test_list_available_templates():
    templates = list_available_templates()
    assert isinstance(templates, list)
    assert "picker" in templates


def test_validate_template():
    assert validate_template("picker") is True
    assert validate_template("nonexistent") is False
    assert validate_template("../evil") is False
