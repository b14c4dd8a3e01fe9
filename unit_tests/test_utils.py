from soccer_api.utils import generate_id, generate_slug, total_pages


def test_generate_slug():
    assert generate_slug("Manchester United!") == "manchester-united"


def test_generate_slug_keeps_word_characters_and_hyphens():
    assert generate_slug("Real  Madrid C.F.") == "real--madrid-cf"
    assert generate_slug("under_21-squad") == "under_21-squad"


def test_generate_id_is_unique():
    ids = {generate_id() for _ in range(100)}
    assert len(ids) == 100


def test_total_pages():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2
