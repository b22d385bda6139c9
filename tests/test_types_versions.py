import json

import pytest

import header_parser

EXPECTED_THREE_VERSIONS = """{
    "<4.3.0-0": {
        "*": [
            "ts4.2/*"
        ]
    },
    "<4.4.0-0": {
        "*": [
            "ts4.3/*"
        ]
    },
    "<4.7.0-0": {
        "*": [
            "ts4.6/*"
        ]
    }
}"""


def test_make_types_versions_empty_input_is_none() -> None:
    assert header_parser.make_types_versions_for_package_json([]) is None


def test_make_types_versions_single_version() -> None:
    assert header_parser.make_types_versions_for_package_json(["4.3"]) == {
        "<4.4.0-0": {"*": ["ts4.3/*"]},
    }


@pytest.mark.parametrize(
    "versions",
    [["4.2", "4.3", "4.6"], ["4.6", "4.3", "4.2"], ["4.3", "4.6", "4.2"]],
)
def test_make_types_versions_orders_old_to_new(versions: list[str]) -> None:
    table = header_parser.make_types_versions_for_package_json(versions)

    assert json.dumps(table, indent=4) == EXPECTED_THREE_VERSIONS


def test_make_types_versions_accepts_any_iterable() -> None:
    table = header_parser.make_types_versions_for_package_json(iter(("4.6", "4.2")))

    assert list(table or {}) == ["<4.3.0-0", "<4.7.0-0"]


def test_make_types_versions_bound_crosses_major() -> None:
    assert header_parser.make_types_versions_for_package_json(["4.9"]) == {
        "<5.0.0-0": {"*": ["ts4.9/*"]},
    }


def test_make_types_versions_sorts_numerically_not_lexically() -> None:
    table = header_parser.make_types_versions_for_package_json(["3.9", "2.9", "3.1"])

    assert list(table or {}) == ["<3.0.0-0", "<3.2.0-0", "<4.0.0-0"]


def test_make_types_versions_only_newest_is_too_new() -> None:
    with pytest.raises(
        header_parser.RedirectTooNew,
        match="ts5.0 is too new: it covers all versions of typescript",
    ) as exc_info:
        header_parser.make_types_versions_for_package_json(["5.0"])

    assert exc_info.value.code == "REDIRECT_TOO_NEW"


def test_make_types_versions_skips_newest_among_others() -> None:
    assert header_parser.make_types_versions_for_package_json(["5.0", "4.8"]) == {
        "<4.9.0-0": {"*": ["ts4.8/*"]},
    }


def test_make_types_versions_duplicates_collapse() -> None:
    assert header_parser.make_types_versions_for_package_json(["4.3", "4.3"]) == {
        "<4.4.0-0": {"*": ["ts4.3/*"]},
    }


@pytest.mark.parametrize("version", ["5.7", "4.10", "latest"])
def test_make_types_versions_rejects_unknown_versions(version: str) -> None:
    with pytest.raises(header_parser.InvalidVersion) as exc_info:
        header_parser.make_types_versions_for_package_json(["4.2", version])

    assert version in exc_info.value.message


def test_make_types_versions_uses_given_registry(
    small_registry: header_parser.VersionRegistry,
) -> None:
    assert header_parser.make_types_versions_for_package_json(
        ["3.9"], registry=small_registry
    ) == {"<4.0.0-0": {"*": ["ts3.9/*"]}}

    with pytest.raises(header_parser.RedirectTooNew, match="ts4.1 is too new"):
        header_parser.make_types_versions_for_package_json(
            ["4.1"], registry=small_registry
        )


def test_make_types_versions_accepts_unsupported_versions() -> None:
    assert header_parser.make_types_versions_for_package_json(["2.9"]) == {
        "<3.0.0-0": {"*": ["ts2.9/*"]},
    }
