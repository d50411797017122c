import pytest

from rbxstats.core.domain.models import ClientConfig
from rbxstats.core.endpoints import build_path, build_url, redact_url, require_game_id, require_text


def test_build_path_static_only():
    assert build_path("offsets") == "offsets"
    assert build_path("exploits", "windows") == "exploits/windows"


def test_build_path_with_param_and_suffix():
    assert build_path("offsets", "search", param="Humanoid", suffix="plain") == "offsets/search/Humanoid/plain"


def test_build_path_encodes_only_the_param():
    assert build_path("offsets", "search", param="a/b c") == "offsets/search/a%2Fb%20c"


@pytest.mark.parametrize("param,segment", [(".", "%2E"), ("..", "%2E%2E"), ("...", "...")])
def test_build_path_escapes_dot_segments(param, segment):
    assert build_path("offsets", "search", param=param) == f"offsets/search/{segment}"


def test_build_url_shape():
    config = ClientConfig(api_key="abc123", base_url="https://api.rbxstats.xyz/")
    assert build_url(config, "versions/latest") == "https://api.rbxstats.xyz/api/versions/latest?api=abc123"


def test_build_url_encodes_key():
    config = ClientConfig(api_key="a&b=c")
    assert build_url(config, "offsets").endswith("/api/offsets?api=a%26b%3Dc")


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://h/api/offsets?api=secret", "https://h/api/offsets?api=***"),
        ("https://h/api/offsets?x=1&api=secret&y=2", "https://h/api/offsets?x=1&api=***&y=2"),
        ("https://h/api/offsets", "https://h/api/offsets"),
    ],
)
def test_redact_url(url, expected):
    assert redact_url(url) == expected


def test_require_text():
    assert require_text("Humanoid", "name") == "Humanoid"
    with pytest.raises(ValueError):
        require_text("", "name")
    with pytest.raises(TypeError):
        require_text(None, "name")


def test_require_game_id():
    assert require_game_id(0) == 0
    with pytest.raises(TypeError):
        require_game_id(False)
    with pytest.raises(ValueError):
        require_game_id(-5)


def test_client_config_rejects_bad_base_url():
    with pytest.raises(ValueError):
        ClientConfig(api_key="k", base_url="ftp://api.rbxstats.xyz")
