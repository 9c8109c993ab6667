from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from typing import List
from schemas import BmiQuery, BmiResult, ProductResponse, ScanRecord, ScanRecordCreate
from database import MongoHistoryStore, get_history_store
from diet import calculate_bmi, classify_bmi, suggest_diet
from products import fetch_product
from settings import get_settings
import logging

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(levelname)s:%(name)s:%(message)s",
)
logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = {"status": 0, "status_verbose": "Product not found"}
PRODUCT_FETCH_FAILED = {"status": 0, "status_verbose": "Failed to fetch product data"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    store = get_history_store()
    if isinstance(store, MongoHistoryStore):
        store.close()


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

# Any origin when none are configured; regex keeps credentials usable.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=None if settings.cors_origins else r".*",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get(
    "/api/product/{barcode}",
    response_model=ProductResponse,
    responses={500: {"description": "Product source unreachable"}},
)
async def get_product(barcode: str):
    try:
        response = await fetch_product(barcode)
        if not response.is_success:
            logger.info("Product source returned %s for barcode %s", response.status_code, barcode)
            return JSONResponse(status_code=response.status_code, content=PRODUCT_NOT_FOUND)
        data = response.json()
    except Exception:
        logger.exception("Error fetching product %s", barcode)
        return JSONResponse(status_code=500, content=PRODUCT_FETCH_FAILED)

    # relayed verbatim, not re-serialized through ProductResponse
    return JSONResponse(status_code=response.status_code, content=data)


@app.get("/api/history", response_model=List[ScanRecord])
async def history(store=Depends(get_history_store)):
    try:
        return await store.list()
    except Exception:
        logger.exception("Error fetching scan history")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch scan history"})


@app.post(
    "/api/history",
    response_model=ScanRecord,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ScanRecordCreate.model_json_schema()}},
        }
    },
)
async def add_to_history(request: Request, store=Depends(get_history_store)):
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(
            status_code=400,
            content={"error": [{"loc": ["body"], "msg": "Request body is not valid JSON", "type": "json_invalid"}]},
        )

    try:
        candidate = ScanRecordCreate.model_validate(body)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        return JSONResponse(status_code=400, content={"error": jsonable_encoder(errors)})

    try:
        return await store.append(candidate)
    except Exception:
        logger.exception("Error adding to scan history")
        return JSONResponse(status_code=500, content={"error": "Failed to add to scan history"})


@app.post("/api/bmi", response_model=BmiResult)
async def bmi(query: BmiQuery):
    value = calculate_bmi(query.weight, query.height)
    status = classify_bmi(value)
    return BmiResult(bmi=round(value, 1), status=status, plan=suggest_diet(query.gender, status, query.dietType))
