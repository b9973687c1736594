"""
Cache lecture-seule des listes de promotions (read-through avec TTL).
- Une clé fixe par type de promotion, la liste complète (non filtrée) est stockée d'un bloc.
- Backends: "memory" (process, verrou), "redis" (SETEX), "fakeredis" (tests).
- Une panne Redis n'interrompt pas le calcul: log + lecture directe de la source.
Le moteur de calcul ne voit que l'instantané retourné, il ne met rien en cache lui-même.
"""
import json
import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import redis

from reward.config import PROMOTIONS_CACHE_BACKEND, PROMOTIONS_CACHE_TTL_HOURS, CACHE_REDIS_URL

try:
    from fakeredis import FakeRedis  # tests only
except Exception:
    FakeRedis = None

logger = logging.getLogger(__name__)

DISCOUNT_PROMOTIONS_KEY = "reward:promotions:discount"
POINTS_PROMOTIONS_KEY = "reward:promotions:points"

Loader = Callable[[], List[Dict[str, Any]]]


class PromotionCache:
    def __init__(
        self,
        backend: str = "memory",
        ttl_seconds: int = 4 * 3600,
        redis_client: Any = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if backend in ("redis", "fakeredis") and redis_client is None:
            raise ValueError(f"redis_client requis pour le backend {backend}")
        self.backend = backend
        self.ttl_seconds = max(int(ttl_seconds), 1)
        self._redis = redis_client
        self._clock = clock
        self._lock = threading.Lock()
        self._store: Dict[str, Tuple[float, str]] = {}

    def get_or_load(self, key: str, loader: Loader) -> List[Dict[str, Any]]:
        """
        Retourne la liste en cache pour key, sinon appelle loader() et stocke le résultat.
        - Le résultat est toujours une copie fraîche (désérialisée) : aucun appelant ne modifie le cache.
        - Les erreurs du loader sont propagées (rien n'est mis en cache).
        """
        cached = self._read(key)
        if cached is not None:
            return json.loads(cached)

        rows = loader() or []
        payload = json.dumps(rows, default=str)
        self._write(key, payload)
        logger.info("promotions.cache miss key=%s rows=%s backend=%s", key, len(rows), self.backend)
        return json.loads(payload)

    def invalidate(self, *keys: str) -> None:
        keys = keys or (DISCOUNT_PROMOTIONS_KEY, POINTS_PROMOTIONS_KEY)
        if self._redis is not None:
            try:
                self._redis.delete(*keys)
            except Exception as e:
                logger.warning(f"promotions.cache invalidate failed backend={self.backend}: {e}")
            return
        with self._lock:
            for key in keys:
                self._store.pop(key, None)

    def info(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {"backend": self.backend, "ttl_seconds": self.ttl_seconds}
        if self._redis is not None:
            try:
                info["ready"] = bool(self._redis.ping())
            except Exception as e:
                info["ready"] = False
                info["error"] = str(e)
        else:
            with self._lock:
                info["ready"] = True
                info["keys"] = sorted(self._store.keys())
        return info

    def _read(self, key: str) -> Optional[str]:
        if self._redis is not None:
            try:
                return self._redis.get(key)
            except Exception as e:
                logger.warning(f"promotions.cache read failed key={key}, falling back to source: {e}")
                return None
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            expires_at, payload = entry
            if self._clock() >= expires_at:
                self._store.pop(key, None)
                return None
            return payload

    def _write(self, key: str, payload: str) -> None:
        if self._redis is not None:
            try:
                self._redis.setex(key, self.ttl_seconds, payload)
            except Exception as e:
                logger.warning(f"promotions.cache write failed key={key}: {e}")
            return
        with self._lock:
            self._store[key] = (self._clock() + self.ttl_seconds, payload)


def build_promotion_cache(
    backend: str = PROMOTIONS_CACHE_BACKEND,
    ttl_hours: float = PROMOTIONS_CACHE_TTL_HOURS,
    redis_url: str = CACHE_REDIS_URL,
) -> PromotionCache:
    """
    Construit le cache selon la configuration.
    - backend inconnu -> "memory" (avec warning).
    """
    ttl_seconds = int(ttl_hours * 3600)
    if backend == "redis":
        client = redis.from_url(redis_url, encoding="utf-8", decode_responses=True)
        return PromotionCache("redis", ttl_seconds, redis_client=client)
    if backend == "fakeredis":
        if not FakeRedis:
            raise RuntimeError("PROMOTIONS_CACHE_BACKEND=fakeredis mais fakeredis n'est pas installé.")
        return PromotionCache("fakeredis", ttl_seconds, redis_client=FakeRedis(decode_responses=True))
    if backend != "memory":
        logger.warning(f"Unknown PROMOTIONS_CACHE_BACKEND={backend}, using memory")
    return PromotionCache("memory", ttl_seconds)


_cache: Optional[PromotionCache] = None
_cache_lock = threading.Lock()

def get_promotion_cache() -> PromotionCache:
    global _cache
    with _cache_lock:
        if _cache is None:
            _cache = build_promotion_cache()
        return _cache

def set_promotion_cache(cache: Optional[PromotionCache]) -> None:
    """Remplace l'instance globale (lifespan, tests). None force une reconstruction au prochain accès."""
    global _cache
    with _cache_lock:
        _cache = cache
