"""
Limitation de débit optionnelle pour les endpoints publics.
- fastapi-limiter (Redis) si initialisé dans le lifespan.
- LOCAL_RATE_LIMIT_FALLBACK=1: fenêtre glissante en mémoire (dev, tests).
- app.state.rate_limit_enabled == False: aucune limite.
"""
from typing import Dict, Any, List
from urllib.parse import urlparse
from fastapi import Request, Response, HTTPException
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
import os
import time
import logging

logger = logging.getLogger(__name__)

def _client_key(req: Request) -> str:
    # IP (réelle via ProxyHeadersMiddleware) + chemin, jamais un en-tête fourni par le client
    ip = req.client.host if req.client else "local"
    return f"ip:{ip}:{req.url.path}"

def _prune(store: Dict[str, List[float]], now: float) -> None:
    # Les valeurs sont des échéances: une clé dont toutes les échéances sont passées disparaît
    for key in [k for k, expiries in store.items() if not expiries or expiries[-1] <= now]:
        del store[key]

def optional_rate_limit(times: int, seconds: int):
    async def _dep(request: Request, response: Response):
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _client_key(request)
            store = getattr(request.app.state, "_rl_store", {})
            _prune(store, now)
            expiries = [t for t in store.get(key, []) if t > now]
            if len(expiries) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            expiries.append(now + seconds)
            store[key] = expiries
            request.app.state._rl_store = store
            return

        if getattr(request.app.state, "rate_limit_enabled", None) is not True:
            return

        async def _identifier(req: Request) -> str:
            return _client_key(req)

        try:
            return await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
        except HTTPException:
            raise
        except Exception as e:
            # Redis indisponible ou script refusé: pas de 429, on laisse passer
            logger.warning(f"Rate limiter unavailable on {request.url.path}: {e}")
            return
    return _dep

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)

    limiter_ready = getattr(FastAPILimiter, "redis", None) is not None
    backend = "redis" if limiter_ready else None
    if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
        backend = "memory"

    info: Dict[str, Any] = {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": limiter_ready,
        "backend": backend,
    }

    redis_url = os.getenv("RATE_LIMIT_REDIS_URL")
    if limiter_ready and redis_url:
        p = urlparse(redis_url)
        info["redis"] = {
            "scheme": p.scheme,
            "host": p.hostname,
            "port": p.port,
        }
    return info
