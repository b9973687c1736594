import os
import pytest
from typing import Generator
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

# Avant l'import de l'app: pas de Redis pour le rate limiting, cache promotions en mémoire
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")
os.environ["PROMOTIONS_CACHE_BACKEND"] = "memory"
os.environ["SEED_ON_STARTUP"] = "0"

from reward import seed
from reward.app import app as fastapi_app
from reward.catalog.service import decode_product
from reward.promotions.cache import PromotionCache, set_promotion_cache
from reward.promotions.service import decode_discount_promotion, decode_points_promotion

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid or nodeid.startswith("tests/unit/"):
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid or nodeid.startswith("tests/integration/"):
            item.add_marker(pytest.mark.integration)

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

# Données de référence décodées (mêmes valeurs que le seed)
@pytest.fixture
def products():
    return [decode_product(r) for r in seed.PRODUCTS]

@pytest.fixture
def discount_promotions():
    return [decode_discount_promotion(r) for r in seed.DISCOUNT_PROMOTIONS]

@pytest.fixture
def points_promotions():
    return [decode_points_promotion(r) for r in seed.POINTS_PROMOTIONS]

@pytest.fixture
def seeded_repositories(monkeypatch):
    """
    Les repositories renvoient les lignes du seed et comptent leurs appels.
    """
    calls = {"products": 0, "discount": 0, "points": 0}

    def _products():
        calls["products"] += 1
        return [dict(r) for r in seed.PRODUCTS]

    def _discount():
        calls["discount"] += 1
        return [dict(r) for r in seed.DISCOUNT_PROMOTIONS]

    def _points():
        calls["points"] += 1
        return [dict(r) for r in seed.POINTS_PROMOTIONS]

    monkeypatch.setattr("reward.catalog.repository.list_product_rows", _products)
    monkeypatch.setattr("reward.promotions.repository.list_discount_promotion_rows", _discount)
    monkeypatch.setattr("reward.promotions.repository.list_points_promotion_rows", _points)
    return calls

# Cache promotions neuf à chaque test
@pytest.fixture(autouse=True)
def fresh_promotion_cache():
    cache = PromotionCache("memory")
    set_promotion_cache(cache)
    yield cache
    set_promotion_cache(None)

# Aucun test ne doit joindre Supabase
@pytest.fixture(scope="function", autouse=True)
def mock_db_dependency(monkeypatch):
    monkeypatch.setattr("reward.infra.supabase_client.get_supabase", lambda: MagicMock())
    monkeypatch.setattr("reward.infra.supabase_client.get_service_supabase", lambda: MagicMock())
