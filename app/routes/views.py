"""
HTML view routes for the product catalog web interface.

Routes:
    GET /                           - Redirect to the product listing
    GET /products-listing           - Product listing with preview modal
    GET /product-details/<id>       - Product detail page
"""

import logging
from flask import Blueprint, render_template, redirect, url_for, abort

from app.catalog import Product, find_product, get_products

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


def get_product_or_404(product_id: str) -> Product:
    """Fetch product by ID or raise 404."""
    product = find_product(product_id)
    if product is None:
        abort(404)
    return product


@views_bp.route("/")
def index():
    """Send visitors to the product listing."""
    return redirect(url_for("views.products_listing"))


@views_bp.route("/products-listing")
def products_listing():
    """
    Render the product listing page.

    Returns:
        Rendered products_listing.html template.
    """
    logger.info("GET /products-listing - Rendering product listing")

    return render_template("products_listing.html", products=get_products())


@views_bp.route("/product-details/<product_id>")
def product_details(product_id: str):
    """
    Render the product detail page.

    Args:
        product_id: The unique identifier of the product.

    Returns:
        Rendered product_details.html template, or 404 if not found.
    """
    logger.info(f"GET /product-details/{product_id} - Viewing product")

    product = get_product_or_404(product_id)

    return render_template("product_details.html", product=product)
