from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Request

from inventory_api.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])


def _get_inventory_service(request: Request) -> InventoryService:
    svc = getattr(getattr(request.app, "state", None), "inventory_service", None)
    if not svc:
        raise RuntimeError("InventoryService not configured")
    return svc


@router.get("")
def list_products(request: Request):
    logger.info("GET /api/products")
    state = _get_inventory_service(request).list_products()
    return state.to_dict()


@router.get("/{product_id}")
def get_product(product_id: str, request: Request):
    logger.info("GET /api/products/%s", product_id)
    product = _get_inventory_service(request).get_product(product_id)
    return {"success": True, "product": product.to_dict()}


@router.post("")
def create_product(request: Request, payload: Optional[dict] = Body(default=None)):
    payload = payload or {}
    logger.info("POST /api/products %s", payload)
    product = _get_inventory_service(request).create_product(
        payload.get("name"),
        payload.get("quantity"),
        payload.get("purchasePrice"),
        payload.get("sellingPrice"),
    )
    return {
        "success": True,
        "message": "Product added successfully!",
        "product": product.to_dict(),
    }


@router.put("/{product_id}/sell")
def sell_product(product_id: str, request: Request, payload: Optional[dict] = Body(default=None)):
    payload = payload or {}
    logger.info("PUT /api/products/%s/sell %s", product_id, payload)
    result = _get_inventory_service(request).sell_product(product_id, payload.get("quantity"))
    return {
        "success": True,
        "message": "Product sold successfully!",
        "revenue": result.revenue,
        "product": result.product.to_dict(),
    }


@router.delete("/{product_id}")
def delete_product(product_id: str, request: Request):
    logger.info("DELETE /api/products/%s", product_id)
    _get_inventory_service(request).delete_product(product_id)
    return {"success": True, "message": "Product deleted successfully!"}
