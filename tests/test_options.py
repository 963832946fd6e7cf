import pytest

from leonbasic.config import (
    COMMENT_PREFIXES_KEY,
    DEBOUNCE_SECONDS_KEY,
    USE_COMPILER_ERRORS_KEY,
    LintOptions,
)


def test_defaults() -> None:
    options = LintOptions()

    assert options.use_compiler_errors is False
    assert options.comment_prefixes == ("//",)
    assert options.debounce_seconds == 0.3


def test_from_settings_reads_known_keys_and_ignores_others() -> None:
    options = LintOptions.from_settings(
        {
            USE_COMPILER_ERRORS_KEY: True,
            COMMENT_PREFIXES_KEY: ["#", "//"],
            DEBOUNCE_SECONDS_KEY: 1,
            "editor.fontSize": 14,
        }
    )

    assert options == LintOptions(
        use_compiler_errors=True,
        comment_prefixes=("#", "//"),
        debounce_seconds=1.0,
    )


def test_from_empty_settings_matches_defaults() -> None:
    assert LintOptions.from_settings({}) == LintOptions()


@pytest.mark.parametrize(
    ("settings", "key"),
    [
        ({USE_COMPILER_ERRORS_KEY: "yes"}, USE_COMPILER_ERRORS_KEY),
        ({COMMENT_PREFIXES_KEY: "//"}, COMMENT_PREFIXES_KEY),
        ({COMMENT_PREFIXES_KEY: ["//", 3]}, COMMENT_PREFIXES_KEY),
        ({DEBOUNCE_SECONDS_KEY: True}, DEBOUNCE_SECONDS_KEY),
        ({DEBOUNCE_SECONDS_KEY: "0.5"}, DEBOUNCE_SECONDS_KEY),
    ],
)
def test_from_settings_rejects_wrongly_typed_values(settings: dict[str, object], key: str) -> None:
    with pytest.raises(ValueError, match=key.replace(".", r"\.")):
        LintOptions.from_settings(settings)


def test_options_validate_values() -> None:
    with pytest.raises(ValueError, match="debounce_seconds cannot be negative"):
        LintOptions(debounce_seconds=-0.1)
    with pytest.raises(ValueError, match="empty strings"):
        LintOptions(comment_prefixes=("",))
