"""
Assertion helpers with expected/actual messages
Each helper names the field it checks so a failure reads on its own.
"""

from typing import Any, Optional

from restful_crud.client import ApiResponse


def assert_status(response: ApiResponse, expected: int = 200) -> None:
    assert response.status_code == expected, (
        f"{response.method} {response.url}: expected HTTP {expected}, got {response.status_code}. "
        f"Body: {response.text[:500]}"
    )


def assert_present(field: str, value: Any) -> None:
    assert value, f"{field}: expected a value, got {value!r}"


def assert_field(field: str, expected: Any, actual: Any) -> None:
    assert actual == expected, f"{field}: expected {expected!r}, got {actual!r}"


def assert_contains(field: str, needle: str, haystack: Optional[str], ignore_case: bool = False) -> None:
    text = haystack or ""
    found = needle.lower() in text.lower() if ignore_case else needle in text
    assert found, f"{field}: expected {text!r} to contain {needle!r}"


def assert_at_least(field: str, minimum: int, actual: int) -> None:
    assert actual >= minimum, f"{field}: expected at least {minimum}, got {actual}"
