import pytest

from link_recognizer import segment


def test_host_and_path_components():
    assert segment("http://www.lojadojoao.com.br/p/16599221") == [
        "www.lojadojoao.com.br",
        "p",
        "16599221",
    ]


def test_tracking_suffix_is_not_captured():
    url = "http://www.lojadamaria.com.br/perfume-the-one-sport-masculino-edt?utm_source=ShopBack"
    assert segment(url) == ["www.lojadamaria.com.br", "perfume-the-one-sport-masculino-edt"]


def test_plus_suffix_after_path():
    url = "http://www.lojadamaria.com.br/perfume-the-one-sport-masculino-edt/t/2/campanha_id/+752+"
    assert segment(url) == [
        "www.lojadamaria.com.br",
        "perfume-the-one-sport-masculino-edt",
        "t",
        "2",
        "campanha_id",
    ]


def test_bare_root_path_keeps_only_host():
    assert segment("http://www.lojadojoao.com.br/") == ["www.lojadojoao.com.br"]


def test_host_without_path():
    assert segment("https://example.com") == ["example.com"]


def test_at_most_six_segments():
    result = segment("http://shop.example.com/a/b/c/d/e/f/g/h")
    assert result == ["shop.example.com", "a", "b", "c", "d", "e"]


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "ftp://example.com/file",
        "mailto:someone@example.com",
        "http:///missing-host",
        "http//example.com/a",
    ],
)
def test_non_http_input_gives_empty_result(url):
    assert segment(url) == []


def test_scheme_is_case_insensitive_and_host_case_preserved():
    assert segment("HTTP://Example.com/a") == ["Example.com", "a"]
    assert segment("http://example.com/a") == ["example.com", "a"]


def test_segments_never_empty_or_slashed():
    for url in [
        "http://example.com//a",
        "http://example.com/a/b?x=1",
        "https://example.com/",
        "http://example.com/a-b_c/d",
    ]:
        for value in segment(url):
            assert value
            assert "/" not in value


def test_segmentation_is_repeatable():
    url = "https://www.lojadoze.com.br/chapeu-caipira-de-palha-desfiado?google"
    assert segment(url) == segment(url)
