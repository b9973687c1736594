# module reward.pricing.views

"""Endpoint de calcul d'une transaction.
- POST /api/transaction/calculate: sous-total, remise, total payé et points gagnés.
Erreurs:
- 400 si CustomerId/LoyaltyCard manquants ou panier vide (validation de surface).
- 400 si TransactionDate illisible (InvalidArgument du moteur).
- 500 générique pour toute autre erreur (détail uniquement dans les logs).
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from reward.utils.rate_limit import optional_rate_limit
from reward.pricing import service as pricing_service
from reward.pricing.errors import InvalidArgument
from reward.pricing.schemas import TransactionRequestIn, TransactionResponseOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/transaction", tags=["Transaction API"])

INVALID_REQUEST_MESSAGE = "Invalid request format. Missing CustomerId, LoyaltyCard, or non-empty Basket."
INTERNAL_ERROR_MESSAGE = "An internal error occurred during calculation."


@router.post("/calculate", dependencies=[Depends(optional_rate_limit(times=60, seconds=60))])
def calculate(payload: TransactionRequestIn):
    """Calcule les totaux et les points d'un panier.
    Étapes:
    - Vérifie la présence de CustomerId, LoyaltyCard et d'au moins une ligne de panier.
    - Convertit le JSON (clés avec ou sans espaces, nombres en texte) vers la requête du moteur.
    - Délègue au service (instantanés catalogue + promotions, puis moteur).
    - Retourne les montants formatés en texte à deux décimales.
    """
    if not payload.is_complete():
        return JSONResponse(status_code=400, content={"Error": INVALID_REQUEST_MESSAGE})

    try:
        result = pricing_service.calculate_transaction(payload.to_request())
        return JSONResponse(TransactionResponseOut.from_result(result).to_wire())
    except InvalidArgument as e:
        return JSONResponse(status_code=400, content={"Error": e.message})
    except Exception:
        logger.exception("An internal error occurred during calculation.")
        return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_MESSAGE})
