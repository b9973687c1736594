# reward.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

"""
Configuration centrale du service Reward.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets/URLs Supabase
- Paramètres du cache des promotions (backend, TTL, URL Redis)
- CORS/hosts et options de démarrage (seed)
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _env_flag(name: str, default: str = "false") -> bool:
    return _clean_env(os.getenv(name, default)).lower() in ("1", "true", "yes")

# Supabase: URL et clés (anon/service)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or "")
SUPABASE_KEY = _clean_env(os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or "")
SUPABASE_ANON = _clean_env(os.getenv("SUPABASE_ANON_KEY") or "") or SUPABASE_KEY
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Tables Supabase lues par le service
PRODUCTS_TABLE = os.getenv("PRODUCTS_TABLE", "products")
DISCOUNT_PROMOTIONS_TABLE = os.getenv("DISCOUNT_PROMOTIONS_TABLE", "discount_promotions")
POINTS_PROMOTIONS_TABLE = os.getenv("POINTS_PROMOTIONS_TABLE", "points_promotions")

# Cache des promotions: "memory" (process), "redis" ou "fakeredis" (tests)
PROMOTIONS_CACHE_BACKEND = _clean_env(os.getenv("PROMOTIONS_CACHE_BACKEND", "memory")).lower()
PROMOTIONS_CACHE_TTL_HOURS = float(os.getenv("PROMOTIONS_CACHE_TTL_HOURS", "4"))
CACHE_REDIS_URL = _clean_env(os.getenv("CACHE_REDIS_URL") or "redis://127.0.0.1:6379/1")

# Démarrage: insère les données de référence si la table products est vide
SEED_ON_STARTUP = _env_flag("SEED_ON_STARTUP")

# CORS (dev)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]
