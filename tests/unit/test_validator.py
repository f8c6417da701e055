# -*- coding: utf-8 -*-
"""
Тесты для core/utils/validator.py
"""
import pytest

from core.utils.validator import MAX_INPUT_LENGTH, is_help_request, sanitize_args, sanitize_user_input


def test_sanitize_user_input():
    assert sanitize_user_input("  London ") == "London"
    assert sanitize_user_input("São Paulo, br") == "São Paulo, br"
    assert sanitize_user_input("Москва") == "Москва"
    assert sanitize_user_input("St. John's") == "St. John's"
    assert sanitize_user_input("<b>Paris</b>") == "bParisb"
    assert sanitize_user_input("New\tYork") == "New York"
    assert len(sanitize_user_input("a" * 500)) == MAX_INPUT_LENGTH
    print("✅ test_sanitize_user_input passed")


def test_sanitize_user_input_rejects_non_string():
    with pytest.raises(ValueError):
        sanitize_user_input(123)


def test_sanitize_args():
    assert sanitize_args(["New", "York,", "us"]) == ["New", "York,", "us"]
    assert sanitize_args(["<>", "Berlin"]) == ["Berlin"]
    assert sanitize_args([]) == []
    assert sanitize_args(None) == []


def test_sanitize_args_caps_joined_length():
    args = ["abcdefghij"] * 30
    cleaned = sanitize_args(args)
    assert len(" ".join(cleaned)) == MAX_INPUT_LENGTH
    assert cleaned[0] == "abcdefghij"

    cleaned = sanitize_args(["x" * 99, "Berlin"])
    assert " ".join(cleaned) == "x" * 99

    cleaned = sanitize_args(["Rio de Janeiro,", "br"])
    assert cleaned == ["Rio", "de", "Janeiro,", "br"]
    print("✅ test_sanitize_args_caps_joined_length passed")


def test_is_help_request():
    assert is_help_request(["help"])
    assert is_help_request(["HELP"])
    assert not is_help_request(["help", "me"])
    assert not is_help_request([])


if __name__ == "__main__":
    test_sanitize_user_input()
    test_sanitize_args()
    test_sanitize_args_caps_joined_length()
    test_is_help_request()
