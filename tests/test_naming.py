from __future__ import annotations

import pytest

from numer.naming import is_valid_package_name, sanitize_directory_name, suggest_package_name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("My App/", "My App"),
        ("  My App/  ", "My App"),
        ("demo", "demo"),
        ("nested/dir///", "nested/dir"),
        ('a<b>c:d"e\\f|g?h*i', "abcdefghi"),
        ("a *", "a"),
        ("   ", ""),
        ('<>:"\\|?*', ""),
        ("/", ""),
    ],
)
def test_sanitize_directory_name(value, expected):
    assert sanitize_directory_name(value) == expected


@pytest.mark.parametrize(
    "value",
    ["My App/", "a *", " x / * ", "dir/ /", "?/?/", "  spaced  out  ", "ok"],
)
def test_sanitize_directory_name_is_idempotent(value):
    once = sanitize_directory_name(value)
    assert sanitize_directory_name(once) == once


@pytest.mark.parametrize(
    "value, expected",
    [
        ("My App!!", "my-app"),
        ("My   App", "my-app"),
        (".hidden", "hidden"),
        ("_private", "private"),
        ("Hello.World", "hello-world"),
        ("tilde~ok", "tilde~ok"),
        ("Café", "caf"),
        ("project-name", "project-name"),
        ("!!!", ""),
    ],
)
def test_suggest_package_name(value, expected):
    assert suggest_package_name(value) == expected


@pytest.mark.parametrize(
    "value",
    ["My App!!", "  Spaces Everywhere ", ".dot", "__init__", "UPPER_case", "a--b", "x~y"],
)
def test_suggestions_are_stable_and_valid(value):
    suggestion = suggest_package_name(value)
    assert suggest_package_name(suggestion) == suggestion
    assert is_valid_package_name(suggestion)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("@scope/name", True),
        ("name", True),
        ("my-app", True),
        ("my.app", True),
        ("~tilde", True),
        ("@*/x", True),
        ("UPPER", False),
        ("", False),
        ("@scope/Name", False),
        (".leading-dot", False),
        ("_leading-underscore", False),
        ("with space", False),
        ("@scope/", False),
        ("name\n", False),
        (None, False),
    ],
)
def test_is_valid_package_name(name, expected):
    assert is_valid_package_name(name) is expected
