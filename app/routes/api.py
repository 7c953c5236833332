"""
JSON API endpoints for the product catalog.

Endpoints:
    GET /api/health          - Health check
    GET /api/products        - List all products
    GET /api/products/<id>   - Get a single product by ID
"""

import logging
import os
from flask import Blueprint, jsonify, Response

from app.catalog import find_product, get_products

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint used as the readiness probe."""
    return jsonify({
        "status": "healthy",
        "service": "catalog",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/products", methods=["GET"])
def get_products_list() -> tuple[Response, int]:
    """
    List all products.

    Returns:
        JSON array of products in listing order.
    """
    logger.info("GET /api/products - Listing products")
    return jsonify([product.to_dict() for product in get_products()]), 200


@api_bp.route("/products/<product_id>", methods=["GET"])
def get_product(product_id: str) -> tuple[Response, int]:
    """
    Get a single product by ID.

    Args:
        product_id: The unique identifier of the product.

    Returns:
        JSON product object, or 404 if not found.
    """
    logger.info(f"GET /api/products/{product_id}")

    product = find_product(product_id)
    if product is None:
        return jsonify({"error": f"Product {product_id} not found"}), 404

    return jsonify(product.to_dict()), 200
