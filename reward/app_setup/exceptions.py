"""
Gestionnaires d'exceptions enregistrés par la factory.
- HTTPException: JSON {"detail": ...} pour les clients programmatiques.
- InvalidArgument (moteur): 400 {"Error": message}.
- Corps JSON illisible sur /api/transaction: 400 au format d'erreur de l'API de calcul.
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from reward.pricing.errors import InvalidArgument
from reward.pricing.views import INVALID_REQUEST_MESSAGE

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def json_http_errors(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)

    @app.exception_handler(InvalidArgument)
    async def invalid_argument(request: Request, exc: InvalidArgument):
        return JSONResponse(status_code=400, content={"Error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def invalid_request_body(request: Request, exc: RequestValidationError):
        if request.url.path.startswith("/api/transaction/"):
            return JSONResponse(status_code=400, content={"Error": INVALID_REQUEST_MESSAGE})
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})
