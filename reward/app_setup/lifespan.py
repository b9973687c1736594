"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Initialise FastAPILimiter (Redis) avec options de test (fakeredis).
- Construit le cache des promotions (memory/redis/fakeredis).
- Insère les données de référence si SEED_ON_STARTUP=1.
- Variables d'environnement supportées:
  - DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1: désactive le rate limiting (tests)
  - USE_FAKE_REDIS_FOR_TESTS=1: utilise fakeredis pour le rate limiting (tests)
  - LOCAL_RATE_LIMIT_FALLBACK=1: active un fallback local si l'init échoue
"""
import os
import logging
import redis.asyncio as aioredis
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi_limiter import FastAPILimiter

import reward.infra.supabase_client as supabase_client
from reward import config
from reward.promotions.cache import build_promotion_cache, set_promotion_cache
from reward.seed import seed_if_empty

try:
    from fakeredis.aioredis import FakeRedis  # tests only
except Exception:
    FakeRedis = None

logger = logging.getLogger("uvicorn.error")


async def _init_rate_limiter(app: FastAPI) -> None:
    if os.getenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS") == "1":
        app.state.rate_limit_enabled = False
        logger.info("Rate limiting disabled by DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS")
        return
    try:
        if os.getenv("USE_FAKE_REDIS_FOR_TESTS") == "1":
            if not FakeRedis:
                raise RuntimeError("USE_FAKE_REDIS_FOR_TESTS=1 mais fakeredis n'est pas installé.")
            r = FakeRedis(decode_responses=True)
        else:
            redis_url = os.getenv("RATE_LIMIT_REDIS_URL", "redis://127.0.0.1:6379/0")
            r = aioredis.from_url(redis_url, encoding="utf-8", decode_responses=True)

        await FastAPILimiter.init(r)
        app.state.rate_limit_enabled = True
        logger.info("Rate limiting enabled")
    except Exception as e:
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            app.state.rate_limit_enabled = True
            logger.warning(f"Rate limiting falling back to local in-memory due to init error: {e}")
        else:
            app.state.rate_limit_enabled = False
            logger.warning(f"Rate limiting disabled due to init error: {e}")


def _init_promotion_cache(app: FastAPI) -> None:
    try:
        cache = build_promotion_cache(
            config.PROMOTIONS_CACHE_BACKEND,
            config.PROMOTIONS_CACHE_TTL_HOURS,
            config.CACHE_REDIS_URL,
        )
    except Exception as e:
        logger.warning(f"Promotion cache backend {config.PROMOTIONS_CACHE_BACKEND} unavailable, using memory: {e}")
        cache = build_promotion_cache("memory", config.PROMOTIONS_CACHE_TTL_HOURS)
    set_promotion_cache(cache)
    app.state.promotion_cache = cache
    logger.info(f"Promotion cache ready backend={cache.backend} ttl={cache.ttl_seconds}s")


def _seed_reference_data() -> None:
    if not config.SEED_ON_STARTUP:
        return
    try:
        seed_if_empty(supabase_client.get_service_supabase())
    except Exception:
        logger.exception("Seed on startup failed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Démarrage: rate limiting, cache des promotions, seed optionnel.
    - Aucun échec d'initialisation n'empêche le démarrage (logs warning/exception).
    Arrêt: ferme la connexion du limiter si elle existe.
    """
    await _init_rate_limiter(app)
    _init_promotion_cache(app)
    _seed_reference_data()

    yield

    if getattr(app.state, "rate_limit_enabled", False) and FastAPILimiter.redis is not None:
        await FastAPILimiter.close()
