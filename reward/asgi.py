"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.
- Un process manager (ex: gunicorn -k uvicorn.workers.UvicornWorker) importe `reward.asgi:app`.
"""

from reward.app import app

if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "reward.asgi:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,     # rechargement automatique en dev
    )
