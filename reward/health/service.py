from urllib.parse import urlparse
import socket
import reward.infra.supabase_client as supabase_client
from reward.config import SUPABASE_URL, PRODUCTS_TABLE, DISCOUNT_PROMOTIONS_TABLE, POINTS_PROMOTIONS_TABLE
from reward.promotions.cache import get_promotion_cache

def _check_table(client, name: str):
    try:
        res = client.table(name).select("*").limit(1).execute()
        cnt = len(res.data or [])
        return {"ok": True, "rows": cnt}
    except Exception as e:
        return {"ok": False, "error": str(e)}

def health_supabase_info():
    """
    Diagnostic Supabase: résolution DNS de l'hôte puis lecture d'une ligne par table.
    Ne lève jamais: les erreurs sont rapportées dans le dictionnaire.
    """
    parsed = urlparse(SUPABASE_URL) if SUPABASE_URL else None
    hostname = parsed.hostname if parsed else None
    dns_ok = None
    dns_error = None
    if hostname:
        try:
            socket.getaddrinfo(hostname, 443)
            dns_ok = True
        except OSError as e:
            dns_ok = False
            dns_error = str(e)

    info = {
        "supabase_url": SUPABASE_URL,
        "hostname": hostname,
        "dns_ok": dns_ok,
        "dns_error": dns_error,
        "connect_ok": False,
        "error": None,
        "tables": {},
    }
    try:
        client = supabase_client.get_supabase()
        for t in [PRODUCTS_TABLE, DISCOUNT_PROMOTIONS_TABLE, POINTS_PROMOTIONS_TABLE]:
            info["tables"][t] = _check_table(client, t)
        info["connect_ok"] = True
    except Exception as e:
        info["error"] = str(e)
    return info

def health_cache_info():
    return get_promotion_cache().info()
