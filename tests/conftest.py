from pathlib import Path

import pytest

from link_recognizer import ReferenceProduct, load_catalog

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def catalog_path() -> Path:
    return FIXTURES_DIR / "catalog.json"


@pytest.fixture
def catalog(catalog_path):
    return load_catalog(catalog_path)


@pytest.fixture
def joao() -> ReferenceProduct:
    return ReferenceProduct(
        id=16599221,
        title="Produto de Teste 1",
        price=100.0,
        link="http://www.lojadojoao.com.br/p/16599221",
    )


@pytest.fixture
def ze() -> ReferenceProduct:
    return ReferenceProduct(
        id=8595,
        title="Produto Sem Nome",
        price=140.0,
        link="http://www.lojadoze.com.br/p/chapeu-caipira-de-palha-desfiado/campanha_id/34",
    )
